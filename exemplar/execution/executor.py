import importlib
import sys
import traceback
from copy import deepcopy

from exemplar.execution import runtime
from exemplar.db.driver import ContractDriver
from exemplar.execution.module import install_database_loader, enable_restricted_imports, \
    disable_restricted_imports
from exemplar.exceptions import Unauthorized
from exemplar.logger import get_logger
from exemplar import config

log = get_logger('Executor')


class Executor:
    def __init__(self, driver=None):
        self.driver = driver if driver is not None else ContractDriver()

        runtime.rt.env.update({'__Driver': self.driver})

    def execute(self, sender, contract_name, function_name, kwargs,
                environment={},
                auto_commit=True,
                driver=None) -> dict:

        assert not function_name.startswith(config.PRIVATE_METHOD_PREFIX), 'Private method not callable.'

        driver = driver or self.driver

        runtime.rt.env.update({'__Driver': driver})
        runtime.rt.env.update(environment)

        install_database_loader(driver=driver)

        runtime.rt.set_up()

        status_code = 0
        try:
            runtime.rt.context._base_state = {
                'signer': sender,
                'caller': sender,
                'this': contract_name,
                'owner': driver.get_owner(contract_name)
            }

            if runtime.rt.context.owner is not None and runtime.rt.context.owner != runtime.rt.context.caller:
                raise Unauthorized(caller=runtime.rt.context.caller)

            if driver.get_contract(contract_name) is None:
                raise ImportError('Contract {} not found'.format(contract_name))

            # Previously imported copies bind stale drivers and state
            sys.modules.pop(contract_name, None)

            enable_restricted_imports()
            try:
                module = importlib.import_module(contract_name)
                func = getattr(module, function_name)
                result = func(**kwargs)
            finally:
                disable_restricted_imports()

            events = runtime.rt.take_events()
            writes = deepcopy(driver.pending_writes)

            if auto_commit:
                driver.commit()
        except Exception as e:
            result = e
            status_code = 1
            events = []
            writes = {}

            runtime.rt.take_events()

            log.error('{}.{} failed: {}'.format(contract_name, function_name, e))
            log.debug(traceback.format_exc())

            if auto_commit:
                driver.clear_pending_state()

        ### EXECUTION END

        runtime.rt.clean_up()
        runtime.rt.env.update({'__Driver': driver})

        output = {
            'status_code': status_code,
            'result': result,
            'writes': writes,
            'events': events
        }

        return output
