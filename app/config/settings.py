from typing import Any
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.integrations.whatsapp.config import WhatsAppConfig


class Settings(BaseSettings):
    """
    Configuración de la aplicación utilizando Pydantic BaseSettings.
    Carga automáticamente las variables de entorno.
    """

    # WhatsApp API settings
    WHATSAPP_API_BASE: str = Field("https://graph.facebook.com", description="URL base para la API de WhatsApp")
    WHATSAPP_API_VERSION: str = Field("v18.0", description="Versión de la API de WhatsApp")
    WHATSAPP_PHONE_NUMBER_ID: str = Field("", description="ID del número de teléfono de WhatsApp")
    WHATSAPP_ACCESS_TOKEN: str = Field("", description="Token de acceso permanente para la API de WhatsApp")
    WHATSAPP_TIMEOUT_SECONDS: float = Field(10.0, description="Timeout para requests a la API de WhatsApp")
    WHATSAPP_DEFAULT_COUNTRY_CODE: str = Field("52", description="Código de país para números de 10 dígitos")

    # Reminder engine
    CLINIC_NAME: str = Field("Nuestra Clínica", description="Nombre de la clínica mostrado en los mensajes")
    REMINDER_DAYS_BEFORE: int = Field(3, description="Días de anticipación para enviar recordatorios")
    REMINDER_TEMPLATE_NAME: str = Field("recordatorio_vacuna", description="Plantilla HSM del recordatorio")
    MESSAGING_LOCALE: str = Field("es-MX", description="Locale para fechas y plantillas (BCP 47)")

    # Reminder scheduler
    REMINDER_SCHEDULER_ENABLED: bool = Field(False, description="Habilitar el envío automático de recordatorios")
    REMINDER_SCHEDULER_HOUR: int = Field(9, description="Hora del día para el barrido de recordatorios (0-23)")
    REMINDER_SCHEDULER_TIMEZONE: str = Field("America/Mexico_City", description="Zona horaria del scheduler")

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="Host de PostgreSQL")
    DB_PORT: int = Field(5432, description="Puerto de PostgreSQL")
    DB_NAME: str = Field("vet_reminders", description="Nombre de la base de datos")
    DB_USER: str = Field("postgres", description="Usuario de PostgreSQL")
    DB_PASSWORD: str | None = Field(None, description="Contraseña de PostgreSQL")
    DB_ECHO: bool = Field(False, description="Log SQL queries (solo para debug)")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(10, description="Tamaño del pool de conexiones")
    DB_MAX_OVERFLOW: int = Field(20, description="Máximo overflow del pool")
    DB_POOL_RECYCLE: int = Field(3600, description="Reciclar conexiones cada X segundos")

    # Error tracking
    SENTRY_DSN: str | None = Field(None, description="DSN de Sentry (opcional)")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Nivel de log")
    LOG_FORMAT: str = Field("colored", description="Formato de log: colored, json o plain")

    # Application Settings
    DEBUG: bool = Field(False, description="Modo de depuración")
    ENVIRONMENT: str = Field("production", description="Entorno de ejecución")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignorar campos extras en lugar de generar un error
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("REMINDER_DAYS_BEFORE")
    @classmethod
    def validate_days_before(cls, v):
        if v < 0:
            raise ValueError("REMINDER_DAYS_BEFORE must be 0 or greater")
        return v

    @field_validator("REMINDER_SCHEDULER_HOUR")
    @classmethod
    def validate_scheduler_hour(cls, v):
        if not 0 <= v <= 23:
            raise ValueError("REMINDER_SCHEDULER_HOUR must be between 0 and 23")
        return v

    @field_validator("WHATSAPP_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("WHATSAPP_TIMEOUT_SECONDS must be positive")
        return v

    @field_validator("MESSAGING_LOCALE")
    @classmethod
    def normalize_locale(cls, v: str) -> str:
        # Accept both es_MX and es-MX
        return v.strip().replace("_", "-")

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("colored", "json", "plain"):
            raise ValueError("LOG_FORMAT must be one of: colored, json, plain")
        return v

    @property
    def template_language(self) -> str:
        """Código de idioma para plantillas HSM (ej. 'es' para 'es-MX')."""
        return self.MESSAGING_LOCALE.split("-")[0].lower()

    @property
    def whatsapp_config(self) -> WhatsAppConfig:
        """Configuración explícita para el gateway de WhatsApp."""
        return WhatsAppConfig(
            access_token=self.WHATSAPP_ACCESS_TOKEN,
            phone_number_id=self.WHATSAPP_PHONE_NUMBER_ID,
            api_base=self.WHATSAPP_API_BASE,
            api_version=self.WHATSAPP_API_VERSION,
            timeout=self.WHATSAPP_TIMEOUT_SECONDS,
            default_country_code=self.WHATSAPP_DEFAULT_COUNTRY_CODE,
            template_language=self.template_language,
        )

    @property
    def database_url(self) -> str:
        """Construye la URL de la base de datos asíncrona."""
        encoded_user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            encoded_password = quote_plus(self.DB_PASSWORD)
            return f"postgresql+asyncpg://{encoded_user}:{encoded_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return f"postgresql+asyncpg://{encoded_user}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


# Singleton para configuración
_settings_instance = None


def get_settings() -> Settings:
    """
    Retorna una instancia cacheada de la configuración.
    Esto evita cargar las variables de entorno múltiples veces.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
