"""Command group: slice creation, one subcommand per layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fsdgen.commands._base import FsdGroup
from fsdgen.domain.layers import LAYER_SPECS, LayerKind, LayerSpec
from fsdgen.services.slice import SliceService

if TYPE_CHECKING:
    from fsdgen.commands._context import AppContext


_NEW_EXAMPLES = """\
  fsdgen new page login
  fsdgen new widget header
  fsdgen new feature auth-by-phone
  fsdgen new entity user
  fsdgen new shared ui-kit
  fsdgen --json new widget button"""


@click.group(cls=FsdGroup, invoke_without_command=True, examples=_NEW_EXAMPLES)
@click.pass_context
def new(ctx: click.Context) -> None:
    """Creates new item in a layer."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_layer_command(spec: LayerSpec) -> None:
    kind = spec.kind

    @new.command(
        name=kind.value,
        help=f"Create a {spec.display_name} slice under ./{spec.plural}/.",
        examples=f"  fsdgen new {kind.value} example\n  fsdgen -q new {kind.value} example",
    )
    @click.argument("name", required=False)
    @click.pass_obj
    def _create(app: AppContext, name: str | None) -> None:
        app.emit(SliceService().create_slice(kind, name))


for _kind in LayerKind:
    _register_layer_command(LAYER_SPECS[_kind])
