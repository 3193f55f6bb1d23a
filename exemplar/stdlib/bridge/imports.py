import importlib
import inspect
import sys
from types import FunctionType, ModuleType

from stdlib_list import stdlib_list

from exemplar.db.orm import active_driver


class Func:
    """An exported function a contract must provide, by name and argument names."""
    def __init__(self, name, args=()):
        self.name = name
        self.args = tuple(args)

    def is_of(self, f):
        # Exported functions are wrapped by the export context decorator
        code = inspect.unwrap(f).__code__
        return code.co_name == self.name and code.co_varnames[:code.co_argcount] == self.args


def is_contract(name):
    if not isinstance(name, str) or name.startswith('_'):
        return False
    return active_driver().get_contract(name) is not None


def import_module(name):
    if name in set(stdlib_list(f'{sys.version_info.major}.{sys.version_info.minor}')):
        raise ImportError('{} is a standard library module'.format(name))

    if not is_contract(name):
        raise ImportError('Contract {} not found'.format(name))

    return importlib.import_module(name)


def enforce_interface(m: ModuleType, interface: list):
    implemented = vars(m)

    for func in interface:
        attribute = implemented.get(func.name)
        if not isinstance(attribute, FunctionType) or not func.is_of(attribute):
            return False

    return True


imports_module = ModuleType('importlib')
imports_module.import_module = import_module
imports_module.is_contract = is_contract
imports_module.enforce_interface = enforce_interface
imports_module.Func = Func

exports = {
    'importlib': imports_module,
}
