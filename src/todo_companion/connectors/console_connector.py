# src/todo_companion/connectors/console_connector.py

"""
Interactive console menu.

The menu loop is a coroutine: blocking input() runs in a worker thread via
asyncio.to_thread, everything else happens on the event loop. The task core
is synchronous and is only touched between prompts.
"""

from __future__ import annotations

import asyncio
import logging
import os

from ..core.ports import ConsolePort, TaskRepo
from ..tasks.dates import format_date
from ..tasks.errors import PersistenceWriteError, StorageError, ValidationError
from ..tasks.task_api import build_task, describe_difficulty, sort_for_display
from ..tasks.task_enums import TaskStatus
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

INVALID_OPTION = "Opción inválida. Intente nuevamente."
PRESS_ENTER = "Presiona Enter para continuar..."


class StdConsole:
    """ConsolePort over stdin/stdout."""

    async def ask(self, prompt: str) -> str:
        return await asyncio.to_thread(input, prompt)

    def show(self, text: str = "") -> None:
        print(text)

    def clear(self) -> None:
        if os.isatty(1):
            print("\033[2J\033[H", end="", flush=True)


class TodoApp:
    def __init__(self, io: ConsolePort, store: TaskRepo, username: str = "Usuario") -> None:
        self.io = io
        self.store = store
        self.username = username
        # Never write the file back unless it was loaded (or seeded) successfully.
        self.loaded = False

    # ---- helpers ----

    async def _pause(self, message: str) -> None:
        await self.io.ask(f"\n{message}")

    async def _yes(self, question: str) -> bool:
        return (await self.io.ask(question)).strip().upper() == "S"

    def _persist(self) -> bool:
        try:
            result = self.store.save()
        except PersistenceWriteError as exc:
            self.io.show(f"\n[ERROR] No se pudo guardar: {exc}")
            return False
        self.io.show(f"\n(Tareas guardadas en {result.path})")
        return True

    def save_on_interrupt(self) -> bool:
        if not self.loaded:
            return False
        self._persist()
        return True

    # ---- main loop ----

    async def run(self) -> bool:
        """Load, run the main menu, save on exit. Returns False if startup failed."""
        try:
            result = self.store.load()
        except StorageError as exc:
            logger.error("Startup load failed: %s", exc)
            self.io.show("\n[ERROR CRÍTICO] No se pudo leer el archivo de tareas.")
            self.io.show("Verifique que el archivo no esté corrupto.")
            self.io.show(f"Detalle: {exc}")
            self.io.show("La aplicación no puede iniciar debido a un error crítico.")
            return False

        self.loaded = True
        self.io.show("\n--- Resumen de Carga ---")
        if result.seeded:
            self.io.show("No se encontró el archivo de tareas. Usando datos de demostración.")
        self.io.show(f"Se cargaron {result.loaded} tareas exitosamente.")
        if result.skipped:
            self.io.show(f"Se omitieron {result.skipped} tareas por datos inválidos.")
        self.io.show("------------------------")
        try:
            await self._pause("Presiona Enter para iniciar la aplicación...")
            await self.main_menu()
        except EOFError:
            logger.info("Console EOF received, exiting.")

        self._persist()
        self.io.show("¡Hasta luego!")
        return True

    # ---- menus ----

    async def main_menu(self) -> None:
        while True:
            self.io.clear()
            self.io.show(f"¡Hola {self.username}!\n")
            self.io.show("¿Qué desea hacer?\n")
            self.io.show("[1] Ver mis tareas")
            self.io.show("[2] Buscar una tarea")
            self.io.show("[3] Agregar una tarea")
            self.io.show("[0] Salir\n")
            op = (await self.io.ask("> ")).strip()
            if op == "1":
                await self.menu_view_tasks()
            elif op == "2":
                await self.menu_search()
            elif op == "3":
                await self.menu_add()
            elif op == "0":
                return
            else:
                await self._pause(INVALID_OPTION)

    async def menu_view_tasks(self) -> None:
        filters = {
            "2": (TaskStatus.PENDING, "Tareas Pendientes"),
            "3": (TaskStatus.IN_PROGRESS, "Tareas En curso"),
            "4": (TaskStatus.FINISHED, "Tareas Terminadas"),
        }
        while True:
            self.io.clear()
            self.io.show("¿Qué tarea desea ver?\n")
            self.io.show("[1] Todas")
            self.io.show("[2] Pendientes")
            self.io.show("[3] En curso")
            self.io.show("[4] Terminadas")
            self.io.show("[0] Volver\n")
            op = (await self.io.ask("> ")).strip()
            if op == "0":
                return
            if op == "1":
                await self.list_tasks(self.store.get_all(), "Todas tus tareas")
            elif op in filters:
                status, heading = filters[op]
                await self.list_tasks(self.store.filter_by_status(status), heading)
            else:
                await self._pause(INVALID_OPTION)

    async def list_tasks(self, tasks: list[Task], heading: str) -> None:
        ordered = sort_for_display(tasks)
        while True:
            self.io.clear()
            self.io.show(f"{heading}.\n")
            if not ordered:
                self.io.show("(No hay tareas para mostrar)\n")
                await self._pause("Presiona Enter para volver...")
                return
            for i, task in enumerate(ordered, start=1):
                self.io.show(f"[{i}] {task.title}")
            self.io.show("\n¿Deseas ver los detalles de alguna?")
            self.io.show("Introduce el número para verla o 0 para volver.")
            op = (await self.io.ask("> ")).strip()
            if op == "0":
                return
            try:
                idx = int(op)
            except ValueError:
                idx = 0
            if idx < 1 or idx > len(ordered):
                await self._pause(INVALID_OPTION)
                continue
            await self.menu_details(ordered[idx - 1])

    def render_details(self, task: Task) -> list[str]:
        return [
            f"\t{task.title}",
            f"\t{task.description or '(Sin descripción)'}",
            f"\tEstado: {task.status.label}",
            f"\tDificultad: {describe_difficulty(task.difficulty)}",
            f"\tVencimiento: {format_date(task.due_at)}",
            f"\tCreación: {format_date(task.created_at)}",
            f"\tÚltima edición: {format_date(task.updated_at)}",
        ]

    async def menu_details(self, task: Task) -> None:
        while True:
            self.io.clear()
            self.io.show("Esta es la tarea que elegiste.\n")
            for line in self.render_details(task):
                self.io.show(line)
            self.io.show("\nSi deseas editarla selecciona E, si no 0 para volver")
            op = (await self.io.ask("> ")).strip().upper()
            if op == "0":
                return
            if op == "E":
                await self.menu_edit(task)
            else:
                await self._pause(INVALID_OPTION)

    async def menu_edit(self, task: Task) -> None:
        while True:
            self.io.clear()
            self.io.show(f"Estas editando la tarea: {task.title}")
            self.io.show(" - Si deseas mantener los valores de un atributo simplemente dejalo en blanco")
            self.io.show(" - Si deseas dejar en blanco un atributo, escribe un espacio\n")

            description = await self.io.ask("1. Ingresa la descripción: ")
            status = await self.io.ask("2. Estado([P]endiente/[E]n curso/[T]erminada/[C]ancelada): ")
            difficulty = await self.io.ask("3. Dificultad([1]/[2]/[3]): ")
            due = await self.io.ask("4. Vencimiento (YYYY-MM-DD o DD/MM/YYYY opcional HH:mm): ")

            try:
                task.apply_update(description=description, status=status, difficulty=difficulty, due=due)
            except ValidationError as exc:
                self.io.show(f"\nError: {exc}")
                if not await self._yes("¿Deseas reintentar? (S/N): "):
                    return
                continue

            if self._persist():
                self.io.show("\n¡Datos guardados y archivo actualizado!")
            await self._pause(PRESS_ENTER)
            return

    async def menu_search(self) -> None:
        while True:
            self.io.clear()
            self.io.show("Introduce el título de una tarea para buscarla")
            query = (await self.io.ask("> ")).strip()
            if not query:
                if await self._yes("Búsqueda vacía. ¿Volver? (S/N): "):
                    return
                continue
            results = self.store.search_by_title(query)
            if not results:
                self.io.show("\nNo hay tareas relacionadas con la búsqueda.\n")
                await self._pause(PRESS_ENTER)
                return
            await self.list_tasks(results, "Estas son las tareas relacionadas")
            return

    async def menu_add(self) -> None:
        while True:
            self.io.clear()
            self.io.show("Estas creando una nueva tarea.\n")
            title = await self.io.ask("1. Ingresa el título: ")
            description = await self.io.ask("2. Ingresa la descripción: ")
            status = await self.io.ask(
                "3. Estado ([P]endiente/[E]n curso/[T]erminada/[C]ancelada) [Enter para P]: "
            )
            difficulty = await self.io.ask("4. Dificultad ([1]/[2]/[3]) [Enter para 1]: ")
            due = await self.io.ask(
                "5. Vencimiento (YYYY-MM-DD o DD/MM/YYYY opcional HH:mm) [opcional]: "
            )

            try:
                task = build_task(title, description, status, difficulty, due)
            except ValidationError as exc:
                self.io.show(f"\nError: {exc}")
                if not await self._yes("¿Deseas reintentar? (S/N): "):
                    return
                continue

            self.store.add(task)
            logger.info("Task added title=%r", task.title)
            if self._persist():
                self.io.show("\n¡Datos guardados y archivo actualizado!")
            await self._pause(PRESS_ENTER)
            return
