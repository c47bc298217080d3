"""Interactive menu for browsing and editing the resource records."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Iterator, Optional, TextIO, Union

from .datamanager import (
    DATABASE_NAME,
    DatabaseSaveError,
    Resource,
    ResourceDatabase,
    ResourceNotFoundError,
)
from .interface import print_end_message, print_options_menu, print_welcome_menu


class Option(IntEnum):
    """Menu choices."""

    REQUEST = 1
    INSERT = 2
    DELETE = 3
    SHOW = 4
    QUIT = 5
    SAVE_AND_QUIT = 6


class Console:
    """Reads whitespace-separated answers and drives a ResourceDatabase."""

    def __init__(
        self,
        database: ResourceDatabase,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.database = database
        self._stdin = stdin if stdin is not None else sys.stdin
        self.out = stdout if stdout is not None else sys.stdout
        self._tokens = self._read_tokens()

    def _read_tokens(self) -> Iterator[str]:
        for line in self._stdin:
            yield from line.split()

    def _next_token(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("end of input") from None

    def _write(self, text: str) -> None:
        self.out.write(text)

    def request_info(self) -> Optional[Resource]:
        """Ask for a name and show that resource."""
        self._write("Request Info Stuff\n")
        if not self.database.exists():
            self._write("La BDD no existe desea crearla?[s/n]")
            return None
        self._write("Inserta el nombre de recurso que deseas consultar : ")
        return self.show_resource(self._next_token())

    def show_resource(self, name: str) -> Optional[Resource]:
        """Show a resource, offering to insert one when it is missing."""
        resource = self.database.find(name)
        if resource is not None:
            self._write(
                f"Nombre -> {resource.name} , Enlace -> {resource.link} , "
                f"Tipo -> {resource.type}\n"
            )
            return resource
        self._write("No existe el recurso, ¿desea introducrlo?[s/n]\n")
        if self._next_token().startswith("s"):
            return self.insert_info()
        return None

    def insert_info(self) -> Resource:
        """Ask for the fields of a new resource and add it."""
        self._write("Introduzca los datos de insercion:\nNombre : ")
        name = self._next_token()
        self._write("\nEnlace : ")
        link = self._next_token()
        self._write("\nTipo : ")
        kind = self._next_token()
        self._write("\n")
        resource = Resource(name, link, kind)
        self.database.add(resource)
        return resource

    def delete_info(self) -> Resource:
        """Ask for a name and delete that resource."""
        self._write("Introduzca el nombre del recurso que desea borrar\n")
        return self.database.delete(self._next_token())

    def show_database(self) -> None:
        """List every resource."""
        self._write("\nValores de la BDD : \n\n")
        for resource in self.database:
            self._write(f"{resource.name} {resource.link} {resource.type}\n")
        self._write("\n\n")

    def process_option(self, choice: Union[int, str]) -> bool:
        """Carry out one menu choice; return False when the program should end."""
        try:
            option = Option(choice)
        except ValueError:
            self._write("INPUT desconocido\n")
            raise ValueError(f"unknown option: {choice!r}") from None

        if option is Option.REQUEST:
            self.request_info()
        elif option is Option.INSERT:
            self.insert_info()
        elif option is Option.DELETE:
            self.delete_info()
        elif option is Option.SHOW:
            self.show_database()
        elif option is Option.QUIT:
            return False
        elif option is Option.SAVE_AND_QUIT:
            self.database.save()
            return False
        return True

    def _start_up(self) -> None:
        if self.database.exists() and self.database.load() == 0:
            self._write("Error al parsear la base de datos\n")

    def _manage_error(self, error: Exception) -> None:
        self._write("Resultado erroneo, se procesa\n")
        if isinstance(error, ResourceNotFoundError):
            self._write("[ERROR] Recurso no encontrado\n")
        elif isinstance(error, DatabaseSaveError):
            self._write("[ERROR] No se puede guardar los ultimos valores en la BDD\n")

    def run(self) -> None:
        """Show the menu until the user quits or input ends."""
        print_welcome_menu(self.out)
        self._start_up()
        while True:
            print_options_menu(self.out)
            try:
                token = self._next_token()
            except EOFError:
                break
            try:
                choice: Union[int, str] = int(token)
            except ValueError:
                choice = token
            try:
                if not self.process_option(choice):
                    break
            except EOFError:
                break
            except (ValueError, ResourceNotFoundError, DatabaseSaveError) as error:
                self._manage_error(error)
        print_end_message(self.out)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive menu on a record file."""
    parser = argparse.ArgumentParser(description="Manage a file of named resources.")
    parser.add_argument(
        "database",
        nargs="?",
        default=DATABASE_NAME,
        help="record file to use (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    Console(ResourceDatabase(args.database)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())