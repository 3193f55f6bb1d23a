import sys
import marshal
import builtins
import importlib.util
from importlib.abc import Loader
from importlib.machinery import ModuleSpec
from exemplar.db.driver import ContractDriver
from exemplar.stdlib import env
from exemplar.execution.runtime import rt

# This function overrides the __import__ function, which is the builtin function that is called whenever Python runs
# an 'import' statement. If the globals dictionary contains {'__contract__': True}, then this function will make sure
# that the module being imported comes from the database and not from builtins or site packages.
#
# Note: anything installed with pip or in site-packages will also not work, so contract names *must* be unique.

_import = builtins.__import__


def restricted_import(name, globals=None, locals=None, fromlist=(), level=0):
    if globals is not None and globals.get('__contract__') is True:
        spec = importlib.util.find_spec(name)
        if spec is None or not isinstance(spec.loader, DatabaseLoader):
            raise ImportError("module {} cannot be imported in a smart contract.".format(name))

    return _import(name, globals, locals, fromlist, level)


def enable_restricted_imports():
    builtins.__import__ = restricted_import


def disable_restricted_imports():
    builtins.__import__ = _import


def install_database_loader(driver=None):
    DatabaseFinder.driver = driver or ContractDriver()
    if DatabaseFinder not in sys.meta_path:
        sys.meta_path.insert(0, DatabaseFinder)


def uninstall_database_loader():
    if DatabaseFinder in sys.meta_path:
        sys.meta_path.remove(DatabaseFinder)


class DatabaseFinder:
    driver = ContractDriver()

    @classmethod
    def find_spec(cls, fullname, path=None, target=None):
        # Contracts are flat, top level modules
        if path is not None or '.' in fullname or fullname.startswith('_'):
            return None

        if cls.driver.get(cls.driver.make_key(fullname, '__code__'), save=False) is None:
            return None

        return ModuleSpec(fullname, DatabaseLoader(cls.driver))


class DatabaseLoader(Loader):
    def __init__(self, d=None):
        self.d = d or ContractDriver()

    def create_module(self, spec):
        return None

    def exec_module(self, module):
        # fetch the individual contract
        code = self.d.get_compiled(module.__name__)

        if code is None:
            raise ImportError("Module {} not found".format(module.__name__))

        if type(code) != bytes:
            code = bytes.fromhex(code)

        code = marshal.loads(code)

        scope = env.gather()
        scope.update(rt.env)

        scope.update({'__contract__': True})

        # execute the module with the std env and update the module to pass forward
        exec(code, scope)

        # Update the module's attributes with the new scope
        vars(module).update(scope)
        del vars(module)['__builtins__']

        rt.loaded_modules.append(module.__name__)

    def module_repr(self, module):
        return '<module {!r} (smart contract)>'.format(module.__name__)
