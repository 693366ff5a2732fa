"""
Linked matrix diagrams. Pure Python, no Qt.

Auto-imports all diagram modules so that their ``register_diagram`` side-effects
run; afterwards ``registry.new_diagram()`` knows every kind.
"""
from __future__ import annotations

import importlib
import pkgutil

for _module in pkgutil.iter_modules(__path__, __name__ + "."):
    importlib.import_module(_module.name)
