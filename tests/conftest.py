"""
Pytest configuration and fixtures for rule-validator tests

This module provides shared fixtures for the unit tests.
"""
import os
from pathlib import Path
from typing import Callable

import pytest
import yaml


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )


# =======================
# SCHEMA FIXTURES
# =======================

@pytest.fixture
def user_schema() -> dict:
    """
    Schema used by the user creation endpoint

    Returns:
        Field name -> rule pipeline
    """
    return {
        "username": "required|string|max:255",
        "nombreCompleto": "required|string|max:255",
        "codigo": "required|string|max:100",
        "email": "required|string|email|max:255",
        "password": "required|string|min:4|max:255",
        "roleId": "required|integer",
    }


@pytest.fixture
def valid_user() -> dict:
    """A payload that satisfies user_schema"""
    return {
        "username": "jperez",
        "nombreCompleto": "Juan Pérez",
        "codigo": "OP-001",
        "email": "jperez@example.com",
        "password": "s3creta",
        "roleId": 2,
    }


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def write_yaml(tmp_path) -> Callable[[dict, str], Path]:
    """
    Factory writing a dictionary as a YAML file under tmp_path

    Returns:
        Function (content, file_name) -> path of the written file
    """
    def _write(content: dict, file_name: str = "schema.yaml") -> Path:
        path = tmp_path / file_name
        path.write_text(yaml.safe_dump(content, allow_unicode=True), encoding="utf-8")
        return path

    return _write


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_env_vars():
    """
    Set test environment variables

    This fixture loads config/test.env and sets environment variables
    """
    from dotenv import load_dotenv

    env_path = os.path.join(
        os.path.dirname(os.path.dirname(__file__)),
        "config",
        "test.env"
    )

    if os.path.exists(env_path):
        load_dotenv(env_path, override=True)
