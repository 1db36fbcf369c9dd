"""Greeter kata: the hello world of TDD."""

from katadojo.katas.greeter.greeter import Greeter

NAME = "greeter"
DESCRIPTION = "Say hello to the world or to someone by name"

__all__ = ["Greeter"]
