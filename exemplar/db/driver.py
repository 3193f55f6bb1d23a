from exemplar.db.encoder import encode_kv, decode, make_key
from exemplar import config
from exemplar.logger import get_logger
from datetime import datetime
import marshal

# DB maps bytes to bytes
# Driver maps string to python object
CODE_KEY = config.CODE_KEY
COMPILED_KEY = config.COMPILED_KEY
OWNER_KEY = config.OWNER_KEY
TIME_KEY = config.TIME_KEY
DEVELOPER_KEY = config.DEVELOPER_KEY


class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        key = item.encode()
        value = self.db.get(key)
        if value is None:
            return None
        return decode(value)

    def set(self, key: str, value):
        if value is None:
            self.__delitem__(key)
        else:
            k, v = encode_kv(key, value)
            self.db[k] = v

    def delete(self, key: str):
        self.__delitem__(key)

    def iter(self, prefix: str, length=0):
        p = prefix.encode()

        l = []
        for k in sorted(self.db.keys()):
            if k.startswith(p):
                l.append(k.decode())
            if 0 < length <= len(l):
                break

        return l

    def keys(self):
        return sorted([k.decode() for k in self.db.keys()])

    def flush(self):
        self.db.clear()

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError(item)
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        try:
            del self.db[key.encode()]
        except KeyError:
            pass


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}  # L1 cache
        self.cache = {}  # L0 cache
        self.driver = driver or InMemDriver()

        self.pending_reads = {}

    def find(self, key: str):
        # A pending None is a staged delete and must shadow the committed value
        if key in self.pending_writes:
            return self.pending_writes[key]

        value = self.cache.get(key)
        if value is not None:
            return value

        value = self.driver.get(key)
        if value is not None:
            self.cache[key] = value

        return value

    def get(self, key: str, save: bool = True):
        value = self.find(key)

        if save and key not in self.pending_reads:
            self.pending_reads[key] = value

        return value

    def set(self, key, value):
        if key not in self.pending_reads:
            self.get(key)

        self.pending_writes[key] = value

    def delete(self, key):
        self.set(key, None)

    def commit(self):
        for k, v in self.pending_writes.items():
            if v is None:
                self.driver.delete(k)
                self.cache.pop(k, None)
            else:
                self.driver.set(k, v)

        self.cache.clear()
        self.pending_writes.clear()
        self.pending_reads = {}

    def rollback(self):
        # Returns to the committed state, whatever it was prior to this write session
        self.cache.clear()
        self.pending_reads = {}
        self.pending_writes.clear()

    def clear_pending_state(self):
        self.rollback()


class ContractDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.delimiter = config.INDEX_SEPARATOR
        self.log = get_logger('Driver')

    def items(self, prefix=''):
        # Get all of the items in the cache currently
        _items = {}
        keys = set()

        for k, v in self.pending_writes.items():
            if k.startswith(prefix):
                keys.add(k)
                if v is not None:
                    _items[k] = v

        # Get all of the keys we need
        db_keys = set(self.driver.iter(prefix=prefix))

        # Subtract the already gotten keys
        for k in db_keys - keys:
            _items[k] = self.get(k)

        return dict(sorted(_items.items()))

    def keys(self, prefix=''):
        return list(self.items(prefix).keys())

    def values(self, prefix=''):
        return list(self.items(prefix).values())

    def make_key(self, contract, variable, args=[]):
        return make_key(contract, variable, args)

    def get_var(self, contract, variable, arguments=[]):
        key = self.make_key(contract, variable, arguments)
        return self.get(key)

    def set_var(self, contract, variable, arguments=[], value=None):
        key = self.make_key(contract, variable, arguments)
        self.set(key, value)

    def get_contract(self, name):
        return self.get_var(name, CODE_KEY)

    def get_owner(self, name):
        owner = self.get_var(name, OWNER_KEY)
        if owner == '':
            owner = None
        return owner

    def get_time_submitted(self, name):
        return self.get_var(name, TIME_KEY)

    def get_compiled(self, name):
        return self.get_var(name, COMPILED_KEY)

    def set_contract(self, name, code, owner=None, overwrite=False, timestamp=None, developer=None):
        if self.get_contract(name) is not None and not overwrite:
            return

        code_obj = compile(code, name, 'exec')
        code_blob = marshal.dumps(code_obj)

        self.set_var(name, CODE_KEY, value=code)
        self.set_var(name, COMPILED_KEY, value=code_blob)
        self.set_var(name, OWNER_KEY, value=owner)
        self.set_var(name, TIME_KEY, value=timestamp or datetime.now())
        self.set_var(name, DEVELOPER_KEY, value=developer)

        self.log.debug('Stored contract {}'.format(name))

    def delete_contract(self, name):
        for key in self.keys(name + self.delimiter):
            self.delete(key)

    def get_contract_keys(self, name):
        return self.keys(name + self.delimiter)

    def flush(self):
        self.driver.flush()
        self.clear_pending_state()
