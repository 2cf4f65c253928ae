"""
Tests for the service entry point and project import layout.
"""

import importlib.util
import sys
from pathlib import Path

from fastapi import FastAPI

from tests.conftest import PROJECT_ROOT


def test_stdlib_cmd_is_not_shadowed():
    import cmd
    import pdb

    assert hasattr(cmd, "Cmd")
    assert issubclass(pdb.Pdb, cmd.Cmd)
    assert Path(cmd.__file__).resolve().parent != PROJECT_ROOT.resolve()


def test_cmd_directory_is_not_a_package():
    assert not (PROJECT_ROOT / "cmd" / "__init__.py").exists()
    assert not (PROJECT_ROOT / "cmd" / "api" / "__init__.py").exists()


def test_main_script_builds_the_app(monkeypatch):
    monkeypatch.setattr(sys, "path", [p for p in sys.path if p != str(PROJECT_ROOT)])

    spec = importlib.util.spec_from_file_location(
        "gateway_main", PROJECT_ROOT / "cmd" / "api" / "main.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert isinstance(module.app, FastAPI)
    assert module.PROJECT_ROOT in sys.path
