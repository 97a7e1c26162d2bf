"""Tests for the greeting resolution helpers."""

import dataclasses

import pytest

from app.config import DEFAULT_APP_BG
from app.services.greeting import (
    DEFAULT_NAME,
    GreetingContext,
    GreetingSettings,
    build_greeting_context,
    resolve_background,
    resolve_name,
)


@pytest.mark.parametrize(
    ("nombre", "expected"),
    [
        (None, DEFAULT_NAME),
        ("", DEFAULT_NAME),
        ("Ana", "Ana"),
        (" ", " "),
    ],
)
def test_resolve_name(nombre, expected):
    assert resolve_name(nombre) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, DEFAULT_APP_BG),
        ("", DEFAULT_APP_BG),
        ("  ", DEFAULT_APP_BG),
        ("#123456", "#123456"),
    ],
)
def test_resolve_background(value, expected):
    assert resolve_background(value) == expected


def test_settings_from_config():
    settings = GreetingSettings.from_config({"APP_BG": "red"})

    assert settings.background_style == "red"


def test_settings_from_config_without_key():
    assert GreetingSettings.from_config({}).background_style == DEFAULT_APP_BG


def test_settings_are_frozen():
    settings = GreetingSettings()

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.background_style = "blue"


def test_build_greeting_context():
    settings = GreetingSettings(background_style="blue")

    context = build_greeting_context("Ana", settings)

    assert context == GreetingContext(name="Ana", background_style="blue")
    assert context.to_dict() == {"nombre": "Ana", "bg": "blue"}
