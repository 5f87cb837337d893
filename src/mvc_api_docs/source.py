"""Loading of controller source files."""

import importlib.util
import sys
from pathlib import Path
from types import ModuleType

from mvc_api_docs.errors import SourceLoadError


def load_source(file_path: Path) -> ModuleType:
    """Import a Python source file as a module, without touching ``sys.path``."""
    module_name = f"_apidoc_{file_path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    if spec is None or spec.loader is None:
        raise SourceLoadError(f"{file_path} is not an importable Python source file")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        raise SourceLoadError(f"Could not import {file_path}: {e}") from e
    return module
