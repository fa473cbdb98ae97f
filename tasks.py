import logging
from invoke import Collection, task

from aocprep.scaffold import DEFAULTS, Layout, prepare, registered_days


@task
def newday(c, day):
    """Set up the input file and source stub for a puzzle day."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    prepare(c, day, Layout.from_config(c.config.get("puzzles")))


@task
def days(c):
    """List the days registered in the puzzle module manifest."""
    for day in registered_days(Layout.from_config(c.config.get("puzzles"))):
        print(day)


ns = Collection(newday, days)
ns.configure({"puzzles": dict(DEFAULTS)})
