from exemplar.db.driver import ContractDriver
from exemplar.execution.runtime import rt
from exemplar import config

_fallback_driver = ContractDriver()


def active_driver():
    # Contract modules are executed after the executor installs its driver in the runtime env
    return rt.env.get('__Driver') or _fallback_driver


class Datum:
    """
    A named value stored under ``contract.name``. Reads of a missing key
    return ``default_value``.
    """
    def __init__(self, contract, name, driver: ContractDriver=None, default_value=None):
        self._driver = driver if driver is not None else active_driver()
        self._key = self._driver.make_key(contract, name)
        self._default_value = default_value

    def _read(self, key):
        value = self._driver.get(key)
        if value is None:
            return self._default_value
        return value


class Variable(Datum):
    def __init__(self, contract, name, driver: ContractDriver=None, t=None, default_value=None):
        super().__init__(contract, name, driver=driver, default_value=default_value)
        self._type = t if isinstance(t, type) else None

    def set(self, value):
        if self._type is not None:
            assert isinstance(value, self._type), 'Expected {}, got {}.'.format(self._type.__name__,
                                                                               type(value).__name__)
        self._driver.set(self._key, value)

    def get(self):
        return self._read(self._key)


class Hash(Datum):
    """
    Mapping stored as one key per entry. A tuple index addresses a
    multi-dimensional entry, so ``h['stu', 'colin']`` lives at
    ``contract.name:stu:colin``.
    """
    def _key_for(self, index):
        parts = index if isinstance(index, tuple) else (index,)

        assert len(parts) <= config.MAX_HASH_DIMENSIONS, 'Too many dimensions ({}) for hash. Max is {}.'.format(
            len(parts), config.MAX_HASH_DIMENSIONS)

        keys = []
        for part in parts:
            assert not isinstance(part, slice), 'Slices prohibited in hashes.'

            part = str(part)
            assert config.DELIMITER not in part, 'Illegal delimiter in key.'
            assert config.INDEX_SEPARATOR not in part, 'Illegal separator in key.'

            keys.append(part)

        suffix = config.DELIMITER.join(keys)
        assert len(suffix) <= config.MAX_KEY_SIZE, 'Key is too long ({}). Max is {}.'.format(
            len(suffix), config.MAX_KEY_SIZE)

        return config.DELIMITER.join((self._key, suffix))

    def __setitem__(self, index, value):
        self._driver.set(self._key_for(index), value)

    def __getitem__(self, index):
        return self._read(self._key_for(index))
