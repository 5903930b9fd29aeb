"""Main CLI application using Cyclopts."""

import cyclopts

from indexsync.cli.commands import index, jobs

app = cyclopts.App(
    name="indexsync",
    help="Keep a search index in step with record lifecycle events",
)

app.command(index.app, name="index")
app.command(jobs.app, name="jobs")

if __name__ == "__main__":
    app()
