import sys
from exemplar import config


class Context:
    def __init__(self, base_state, maxlen=config.RECURSION_LIMIT):
        self._state = []
        self._base_state = base_state
        self._maxlen = maxlen

    def _context_changed(self, contract):
        if self._get_state()['this'] == contract:
            return False
        return True

    def _get_state(self):
        if len(self._state) == 0:
            return self._base_state
        return self._state[-1]

    def _add_state(self, state: dict):
        if self._context_changed(state['this']):
            if len(self._state) >= self._maxlen:
                raise RecursionError('Contract call depth exceeded {}'.format(self._maxlen))
            self._state.append(state)
            return True
        return False

    def _pop_state(self):
        if len(self._state) > 0:
            self._state.pop(-1)

    def _reset(self):
        self._state = []

    @property
    def this(self):
        return self._get_state()['this']

    @property
    def caller(self):
        return self._get_state()['caller']

    @property
    def signer(self):
        return self._get_state()['signer']

    @property
    def owner(self):
        return self._get_state()['owner']


_context = Context({
        'this': None,
        'caller': None,
        'owner': None,
        'signer': None
    })


class Event:
    def __init__(self, contract, name, data):
        self.contract = contract
        self.name = name
        self.data = data

    def to_dict(self):
        return {
            'contract': self.contract,
            'event': self.name,
            'data': self.data
        }

    def __eq__(self, other):
        return isinstance(other, Event) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return '<Event {}.{} {}>'.format(self.contract, self.name, self.data)


class Runtime:
    loaded_modules = []

    env = {}

    # Events emitted during the current execution. Only published if it commits.
    events = []

    context = _context

    @classmethod
    def set_up(cls):
        cls.context._reset()
        cls.events = []

    @classmethod
    def clean_up(cls):
        for mod in cls.loaded_modules:
            if sys.modules.get(mod) is not None:
                del sys.modules[mod]

        cls.loaded_modules = []
        cls.context._reset()

    @classmethod
    def emit(cls, name, data):
        cls.events.append(Event(cls.context.this, name, data))

    @classmethod
    def take_events(cls):
        events = cls.events
        cls.events = []
        return events

rt = Runtime()
