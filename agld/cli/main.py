"""Main CLI application using Cyclopts."""

import cyclopts

from agld.cli.commands.resolve import resolve
from agld.cli.commands.serve import serve

app = cyclopts.App(
    name="agld",
    help="Artiina Gold bead gateway",
)

app.command(serve, name="serve")
app.command(resolve, name="resolve")


if __name__ == "__main__":
    app()
