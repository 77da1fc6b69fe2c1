# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import dataclasses
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.table import Table

from disable_posts.core.frontend.console.api import CONSOLE, configure_logging
from disable_posts.core.hooks import PRIORITY_FIRST, PRIORITY_LAST
from disable_posts.core.host import Host, Request, Site
from disable_posts.core.serialization.converters import dump_dict
from disable_posts.plugin import REGISTRATIONS, DisablePostsPlugin
from disable_posts.policy.api import REST_ENDPOINTS, XMLRPC_METHODS
from disable_posts.settings import DisablePostsSettings, apply_overrides, load_settings

logger = logging.getLogger(__name__)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="YAML, JSON or TOML file with the settings"),
]
SectionOption = Annotated[
    Optional[str], typer.Option("--section", help="Top-level key holding the settings")
]
SetOption = Annotated[
    Optional[List[str]],
    typer.Option("--set", "-s", help="Override a setting, e.g. --set status_code=410"),
]


class PruneTarget(str, Enum):
    rest = "rest"
    xmlrpc = "xmlrpc"


def _priority_label(priority: int) -> str:
    if priority == PRIORITY_FIRST:
        return "first"
    if priority == PRIORITY_LAST:
        return "last"
    return str(priority)


def _load(
    config: Optional[Path], section: Optional[str], overrides: Optional[List[str]]
) -> DisablePostsSettings:
    try:
        settings = load_settings(config, section=section) if config else DisablePostsSettings()
        return apply_overrides(settings, overrides or [])
    except (ValueError, KeyError) as e:
        CONSOLE.print(f"[bold red]Invalid settings: {e}")
        raise typer.Exit(code=1)


def hooks():
    """List the lifecycle events the handlers are registered on."""
    table = Table(title="Registered handlers")
    table.add_column("Event")
    table.add_column("Priority")
    table.add_column("Kind")
    table.add_column("Handler")
    for registration in REGISTRATIONS:
        table.add_row(
            registration.event,
            _priority_label(registration.priority),
            registration.kind,
            registration.handler,
        )
    CONSOLE.print(table)


def settings(
    config: ConfigOption = None,
    section: SectionOption = None,
    set: SetOption = None,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write the settings to this file")
    ] = None,
):
    """Show the settings after applying the config file and overrides."""
    resolved = _load(config, section, set)
    if output:
        dump_dict(dataclasses.asdict(resolved), output)
        CONSOLE.print(f"[bold green]Settings written to {output}")
        return

    table = Table(title="Settings")
    table.add_column("Key")
    table.add_column("Value")
    for key, value in dataclasses.asdict(resolved).items():
        table.add_row(key, repr(value))
    CONSOLE.print(table)


def simulate(
    path: Annotated[str, typer.Argument(help="Request path to simulate")] = "/hello-world/",
    config: ConfigOption = None,
    section: SectionOption = None,
    set: SetOption = None,
    home_url: Annotated[str, typer.Option(help="Site home URL")] = "http://localhost/",
    admin_url: Annotated[str, typer.Option(help="Site admin URL")] = "http://localhost/admin/",
    allow_host: Annotated[
        Optional[List[str]], typer.Option(help="Extra host redirects may point to")
    ] = None,
    post_type: Annotated[str, typer.Option(help="Content type the path resolves to")] = "post",
    admin: Annotated[bool, typer.Option(help="Simulate an admin request")] = False,
    ajax: Annotated[bool, typer.Option(help="Simulate an ajax request")] = False,
    cron: Annotated[bool, typer.Option(help="Simulate a scheduled task")] = False,
    rest: Annotated[bool, typer.Option(help="Simulate a REST request")] = False,
):
    """Run a request for a single item through an in-memory host."""
    resolved = _load(config, section, set)
    host = Host(
        site=Site(home_url=home_url, admin_url=admin_url, allowed_redirect_hosts=allow_host or []),
        content_renderer=lambda request: f"<article>{request.path}</article>",
    )
    plugin = DisablePostsPlugin(settings=resolved)
    if not plugin.setup(host.hooks):
        CONSOLE.print("[yellow]Handlers are not registered, the host answers as usual.")

    request = Request(
        path=path,
        singular_post_type=post_type or None,
        is_admin=admin,
        doing_ajax=ajax,
        doing_cron=cron,
        is_rest=rest,
    )
    response = host.handle_request(request)

    CONSOLE.print(f"[bold]Status:[/bold] {response.status}", highlight=False)
    for key, value in response.headers.items():
        CONSOLE.print(f"[bold]{key}:[/bold] {value}", highlight=False, soft_wrap=True)
    if response.body:
        CONSOLE.print(response.body, markup=False, highlight=False, soft_wrap=True)


def prune(target: Annotated[PruneTarget, typer.Argument(help="Table to show")]):
    """List the REST routes or XML-RPC methods that are removed."""
    keys = REST_ENDPOINTS if target == PruneTarget.rest else XMLRPC_METHODS
    for key in keys:
        CONSOLE.print(key, markup=False, highlight=False)


def create_cli() -> typer.Typer:
    app = typer.Typer(pretty_exceptions_enable=False, no_args_is_help=True)

    @app.callback()
    def global_options(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ):
        configure_logging("DEBUG" if verbose else "WARNING")

    app.command("hooks", context_settings={"allow_extra_args": False})(hooks)
    app.command("settings", context_settings={"allow_extra_args": False})(settings)
    app.command("simulate", context_settings={"allow_extra_args": False})(simulate)
    app.command("prune", context_settings={"allow_extra_args": False})(prune)

    return app
