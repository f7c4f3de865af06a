"""
Utilidades de limpieza y validacion de texto.
"""
import re
from typing import Any, Optional

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def clean_string(value: Any) -> str:
    """Recorta espacios; None se convierte en cadena vacia."""
    if value is None:
        return ""
    return str(value).strip()


def clean_optional(value: Any) -> Optional[str]:
    """Como clean_string, pero una cadena vacia se convierte en None."""
    return clean_string(value) or None


def is_valid_uuid(value: str) -> bool:
    return bool(_UUID_RE.match(value or ""))


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value or ""))


def format_error(error: BaseException) -> str:
    """Mensaje legible de una excepcion (cae al nombre de la clase si esta vacio)."""
    message = str(error)
    return message or error.__class__.__name__
