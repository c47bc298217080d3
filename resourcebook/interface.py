"""Fixed menu and message texts of the console."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def print_welcome_menu(out: Optional[TextIO] = None) -> None:
    """Print the greeting shown at start-up."""
    out = out if out is not None else sys.stdout
    out.write("Bienvenido al gestor de la BDD de datos AGENDA de SABIDURIA\n")
    out.write("A continuacion se mostrarán las funcionalidades disponibles\n")


def print_options_menu(out: Optional[TextIO] = None) -> None:
    """Print the list of menu options."""
    out = out if out is not None else sys.stdout
    out.write(
        "1. Consultar referencia\n"
        "2. Insertar referencia\n"
        "3. Borrar referencia\n"
        "4. Mostrar BDD\n"
        "5. Salir sin guardar\n"
        "6. Salir y guardar\n"
    )


def print_end_message(out: Optional[TextIO] = None) -> None:
    """Print the farewell message."""
    out = out if out is not None else sys.stdout
    out.write("Saliendo del programa\n")