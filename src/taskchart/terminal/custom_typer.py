# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

_ALIAS_SEPARATOR = re.compile(r"\s*,\s*")


def command_aliases(name: str) -> list[str]:
    """Split a registered name such as "gantt, g" into its aliases."""
    return [alias for alias in _ALIAS_SEPARATOR.split(name) if alias]


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose commands are registered under "name, alias" strings and can be
    invoked by any of the listed names.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        for registered in self.commands:
            if cmd_name in command_aliases(registered):
                return super().get_command(ctx, registered)
        return super().get_command(ctx, cmd_name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists commands in workflow order in the help output"""

    desired_order = [
        "projects, p",
        "tasks, t",
        "task, tk",
        "gantt, g",
        "all, a",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        listed = [name for name in self.desired_order if name in self.commands]
        return listed + [name for name in self.commands if name not in listed]
