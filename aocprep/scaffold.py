"""Prepare the working files for a single puzzle day.

Each day gets a ``puzzles/<day>/input.txt`` and a source stub copied from a
template. The stub is only ever created once; registering it in the module
manifest happens at the same moment.

The existence check and the copy are not atomic. Two runs for the same day
started at once may both copy the template and both append to the manifest.
"""

import logging
import os
import re
import shlex
from dataclasses import dataclass

log = logging.getLogger(__name__)

# The package sits at the top of the repository.
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULTS = {
    "root": None,
    "source_dir": "src",
    "template": "templates/dayn.rs",
    "extension": "rs",
    "registration": "pub mod day{day};",
}


@dataclass(frozen=True)
class Layout:
    root: str
    source_dir: str = DEFAULTS["source_dir"]
    template: str = DEFAULTS["template"]
    extension: str = DEFAULTS["extension"]
    registration: str = DEFAULTS["registration"]

    @classmethod
    def from_config(cls, settings=None):
        """Build a layout from the ``puzzles`` section of an invoke config."""
        settings = settings or {}

        def get(key):
            value = settings.get(key)
            return DEFAULTS[key] if value is None else value

        return cls(
            root=get("root") or ROOT,
            source_dir=get("source_dir"),
            template=get("template"),
            extension=get("extension"),
            registration=get("registration"),
        )

    @property
    def package_dir(self):
        return os.path.join(self.root, self.source_dir, "puzzles")

    @property
    def manifest(self):
        return os.path.join(self.package_dir, f"mod.{self.extension}")

    @property
    def template_path(self):
        return os.path.join(self.root, self.template)

    def puzzle_dir(self, day):
        return os.path.join(self.root, "puzzles", day)

    def input_file(self, day):
        return os.path.join(self.puzzle_dir(day), "input.txt")

    def stub(self, day):
        return os.path.join(self.package_dir, f"day{day}.{self.extension}")

    def registration_line(self, day):
        return self.registration.format(day=day)


def prepare(c, day, layout):
    """Make sure everything needed to work on ``day`` is in place.

    Returns True when the source stub was created by this call.
    """
    day = str(day)
    log.info("Preparing for day %s", day)

    c.run(f"mkdir -p {shlex.quote(layout.puzzle_dir(day))}")
    c.run(f"touch {shlex.quote(layout.input_file(day))}")

    stub = layout.stub(day)
    if os.path.exists(stub):
        log.debug("%s already exists, leaving it alone", stub)
        return False

    c.run(f"mkdir -p {shlex.quote(os.path.dirname(stub))}")
    c.run(f"cp {shlex.quote(layout.template_path)} {shlex.quote(stub)}")
    _register(layout.manifest, layout.registration_line(day))
    log.info("Created %s", os.path.relpath(stub, layout.root))
    return True


def _register(manifest, line):
    prefix = ""
    if os.path.exists(manifest) and os.path.getsize(manifest):
        with open(manifest, "rb") as f:
            f.seek(-1, os.SEEK_END)
            if f.read(1) != b"\n":
                prefix = "\n"

    with open(manifest, "a", encoding="utf-8") as f:
        f.write(f"{prefix}{line}\n")


def registered_days(layout):
    """Day identifiers listed in the manifest, in the order they were added."""
    if not os.path.exists(layout.manifest):
        return []

    head, _, tail = layout.registration_line("\0").partition("\0")
    pattern = re.compile(re.escape(head) + r"(.+?)" + re.escape(tail))

    days = []
    with open(layout.manifest, encoding="utf-8") as f:
        for line in f:
            match = pattern.fullmatch(line.strip())
            if match:
                days.append(match.group(1))
    return days
