"""
Greeting service: name and background resolution for the greeting page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from app.config import DEFAULT_APP_BG

log = logging.getLogger(__name__)

DEFAULT_NAME = "Mundo"


@dataclass(frozen=True)
class GreetingSettings:
    """Greeting settings fixed once the application has started."""

    background_style: str = DEFAULT_APP_BG

    @classmethod
    def from_config(cls, config: Mapping) -> "GreetingSettings":
        return cls(background_style=resolve_background(config.get("APP_BG")))


@dataclass(frozen=True)
class GreetingContext:
    name: str
    background_style: str

    def to_dict(self) -> dict:
        return {"nombre": self.name, "bg": self.background_style}


def resolve_name(nombre: str | None) -> str:
    """Return ``nombre``, or ``DEFAULT_NAME`` when it is missing or empty."""
    return nombre if nombre else DEFAULT_NAME


def resolve_background(value: str | None) -> str:
    """Return the configured background, falling back to the built-in gradient when blank."""
    if value is None or not value.strip():
        return DEFAULT_APP_BG
    return value


def build_greeting_context(nombre: str | None, settings: GreetingSettings) -> GreetingContext:
    name = resolve_name(nombre)
    log.debug("Greeting resolved for %r", name)
    return GreetingContext(name=name, background_style=settings.background_style)
