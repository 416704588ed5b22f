"""Pytest configuration and fixtures."""

import logging
from dataclasses import dataclass

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset assertkit loggers after each test so handlers do not leak."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("assertkit")
    ]

    for name in names:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        # Package module loggers are held by their modules and must survive.
        if name != "assertkit" and not name.startswith("assertkit."):
            del logging.Logger.manager.loggerDict[name]


@dataclass
class Person:
    name: str
    age: int
    city: str = "Springfield"


@pytest.fixture
def people():
    return [Person("Sue", 20, "Oslo"), Person("Bob", 22, "Lima")]
