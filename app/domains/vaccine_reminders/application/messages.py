"""Outbound message texts for the vaccine reminder flow."""

DEFAULT_CLINIC_NAME = "Nuestra Clínica"


def build_welcome_message(full_name: str, pet_name: str, clinic_name: str | None = None) -> str:
    """Texto de bienvenida enviado al registrar un paciente."""
    return (
        f"¡Hola {full_name}! 👋\n\n"
        f"Gracias por registrar a {pet_name} en nuestro sistema.\n\n"
        "Recibirás recordatorios de vacunas y ofertas especiales.\n\n"
        f"🏥 {clinic_name or DEFAULT_CLINIC_NAME}"
    )


def build_reminder_log_message(vaccine_name: str) -> str:
    """Texto guardado en el historial al enviar un recordatorio."""
    return f"Recordatorio de vacuna: {vaccine_name}"
