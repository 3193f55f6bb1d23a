from exemplar.compilation.compiler import ContractingCompiler
from exemplar.db.driver import ContractDriver
from exemplar.db.orm import active_driver
from exemplar.execution.runtime import rt
from exemplar.exceptions import ContractExists
from exemplar.logger import get_logger
from exemplar import config
from stdlib_list import stdlib_list
import importlib.util
import sys

log = get_logger('Contract')


def shadows_installed_module(name):
    # Imported lazily, the loader pulls in the stdlib scope which imports this module
    from exemplar.execution.module import DatabaseLoader

    try:
        spec = importlib.util.find_spec(name)
    except ValueError:
        # Present in sys.modules without a spec
        return True

    return spec is not None and not isinstance(spec.loader, DatabaseLoader)


class Contract:
    def __init__(self, driver: ContractDriver=None):
        self._driver = driver if driver is not None else active_driver()

    def submit(self, name, code, owner=None, constructor_args={}, developer=None):
        if name in set(stdlib_list(f'{sys.version_info.major}.{sys.version_info.minor}')):
            raise ImportError('Contract name {} is reserved by the standard library'.format(name))

        if self._driver.get_contract(name) is not None:
            raise ContractExists(contract_name=name)

        # Contracts are resolved by import, so an installed package of the same name would win
        if shadows_installed_module(name):
            raise ImportError('Contract name {} is taken by an installed module'.format(name))

        from exemplar.stdlib import env

        c = ContractingCompiler(module_name=name)

        code_obj = c.parse_to_code(code, lint=True)

        scope = env.gather()
        scope.update({'__contract__': True})
        scope.update(rt.env)

        exec(code_obj, scope)

        constructor = scope.get(config.INIT_FUNC_NAME)
        if constructor is not None:
            current_state = rt.context._get_state()
            pushed = rt.context._add_state({
                'owner': owner,
                'caller': current_state['caller'],
                'signer': current_state['signer'],
                'this': name
            })

            try:
                constructor(**(constructor_args or {}))
            finally:
                if pushed:
                    rt.context._pop_state()

        self._driver.set_contract(name=name, code=code_obj, owner=owner, overwrite=False,
                                  developer=developer or rt.context.signer)

        log.debug('Submitted contract {}'.format(name))
