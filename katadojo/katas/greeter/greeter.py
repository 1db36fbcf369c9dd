"""Greetings."""

from __future__ import annotations


class Greeter:
    def hello_world(self) -> str:
        return "Hello, World!"

    def hello_person(self, name: str) -> str:
        return f"Hello {name}!"
