from exemplar.execution.runtime import rt
from exemplar.db.driver import ContractDriver
from exemplar.exceptions import Unauthorized
from contextlib import ContextDecorator
from typing import Any


class __export(ContextDecorator):
    def __init__(self, contract):
        self.contract = contract
        # One entry per active call, so recursive and same-contract calls unwind correctly
        self._pushed = []

    def __enter__(self, *args, **kwargs):
        driver = rt.env.get('__Driver') or ContractDriver()

        pushed = False
        if rt.context._context_changed(self.contract):
            current_state = rt.context._get_state()

            state = {
                'owner': driver.get_owner(self.contract),
                'caller': current_state['this'],
                'signer': current_state['signer'],
                'this': self.contract
            }

            if state['owner'] is not None and state['owner'] != state['caller']:
                raise Unauthorized(caller=state['caller'])

            pushed = rt.context._add_state(state)

        self._pushed.append(pushed)

    def __exit__(self, *args, **kwargs):
        if self._pushed.pop():
            rt.context._pop_state()


exports = {
    '__export': __export,
    'ctx': rt.context,
    'Any': Any
}
