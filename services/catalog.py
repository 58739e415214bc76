import os
from typing import List

BASE_DIR = os.path.dirname(os.path.dirname(__file__))
DEFAULT_EXAMPLES_DIR = os.path.join(BASE_DIR, "examples")

# Demo wordlist/email pairs shipped under examples/
EXAMPLES = [
    {
        "id": "banco-clasico",
        "titulo": "Banco clásico",
        "resumen": "Aviso de bloqueo y verificación de credenciales.",
    },
    {
        "id": "banco-link-falso",
        "titulo": "Banco con link falso",
        "resumen": "Dominio engañoso y urgencia para actualizar acceso.",
    },
    {
        "id": "corporativo-it",
        "titulo": "Soporte corporativo",
        "resumen": "Suplantación de TI solicitando restablecer VPN/MFA.",
    },
    {
        "id": "cuenta-bloqueada",
        "titulo": "Cuenta bloqueada",
        "resumen": "Amenaza de suspensión permanente con enlace falso.",
    },
    {
        "id": "transaccion-sospechosa",
        "titulo": "Transacción sospechosa",
        "resumen": "Alerta falsa de transferencia no autorizada.",
    },
    {
        "id": "acceso-desconocido",
        "titulo": "Acceso desconocido",
        "resumen": "Notificación de inicio de sesión desde dispositivo nuevo.",
    },
    {
        "id": "premio-sorteo",
        "titulo": "Premio de sorteo",
        "resumen": "Phishing de lotería pidiendo datos bancarios para cobrar.",
    },
    {
        "id": "factura-pendiente",
        "titulo": "Factura vencida",
        "resumen": "Cobro falso con amenaza de suspensión de servicio.",
    },
    {
        "id": "actualizacion-datos",
        "titulo": "Actualización de datos",
        "resumen": "Solicitud fraudulenta de renovación de información personal.",
    },
]


def get_examples_dir() -> str:
    return os.getenv("EXAMPLES_DIR", DEFAULT_EXAMPLES_DIR)


def list_examples() -> List[dict]:
    """Return the example catalog with the wordlist and email filenames filled in."""
    return [
        {
            "id": ex["id"],
            "titulo": ex["titulo"],
            "csv": f"{ex['id']}.csv",
            "correo": f"{ex['id']}.txt",
            "resumen": ex["resumen"],
        }
        for ex in EXAMPLES
    ]
