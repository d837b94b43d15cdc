"""Terminal implementations of the Navigator and Notifier ports."""

from __future__ import annotations

from typing import Optional

import click

from catalog.application.ports import Navigator, Notifier


class ConsoleNavigator(Navigator):
    """A one-shot command has no screens; remember where the flow wanted to go."""

    def __init__(self) -> None:
        self.destination: Optional[tuple[str, ...]] = None

    def to_list(self) -> None:
        self.destination = ("list",)

    def to_add(self) -> None:
        self.destination = ("add",)

    def to_edit(self, product_id: str) -> None:
        self.destination = ("edit", product_id)


class ClickNotifier(Notifier):

    def __init__(self) -> None:
        self.messages: list[str] = []

    def alert(self, message: str) -> None:
        self.messages.append(message)
        click.secho(f"Error: {message}", fg="red", err=True)
