from aocprep.scaffold import DEFAULTS, ROOT, Layout, prepare, registered_days

__all__ = ["DEFAULTS", "ROOT", "Layout", "prepare", "registered_days"]
