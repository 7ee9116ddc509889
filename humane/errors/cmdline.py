# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

import importlib
import runpy
import sys

from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    CliApp,
    CliPositionalArg,
    CliSubCommand,
)

from .report import print_report
from .settings import SETTINGS, Settings


class RunCommand(BaseModel):
    """Run a Python target, reporting failures in humane form"""

    target: CliPositionalArg[str] = Field(
        description="'package.module:function', a script path, or a module name"
    )

    def cli_cmd(self) -> None:
        try:
            run_target(self.target)
        except Exception as e:
            print_report(e)
            sys.exit(SETTINGS.exit_code)


class SettingsCommand(BaseModel):
    """Show the effective settings as environment variables"""

    def cli_cmd(self) -> None:
        for name, value in settings_env(SETTINGS).items():
            print(f"{name}={value}")


class CLIArguments(
    BaseSettings, cli_parse_args=True, cli_kebab_case=True, cli_use_class_docs_for_groups=True
):
    """Command line arguments."""

    run: CliSubCommand[RunCommand]
    settings: CliSubCommand[SettingsCommand]

    def cli_cmd(self) -> None:
        CliApp.run_subcommand(self)


def run_target(target: str) -> Any:
    """Run a function, script or module by name."""
    if ":" in target:
        module_name, _, function_name = target.partition(":")
        function = getattr(importlib.import_module(module_name), function_name)
        return function()
    if target.endswith(".py"):
        return runpy.run_path(target, run_name="__main__")
    return runpy.run_module(target, run_name="__main__", alter_sys=True)


def settings_env(settings: Settings) -> dict[str, str]:
    env_prefix = Settings.model_config["env_prefix"]
    return {
        (env_prefix + name).upper(): str(value)
        for name, value in settings.model_dump().items()
    }
