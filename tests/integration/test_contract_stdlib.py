from unittest import TestCase
from exemplar.client import ContractingClient


def ledger():
    balances = Hash(default_value=0)
    total = Variable()

    @construct
    def seed():
        balances['stu'] = 10
        total.set(10)

    @export
    def balance_of(account: str):
        return balances[account]


def reader():
    @export
    def mirrored(account: str):
        ledger = importlib.import_module('ledger')
        return ledger.balance_of(account=account)


def inspector():
    @export
    def has_ledger_shape(name: str):
        m = importlib.import_module(name)
        interface = [
            importlib.Func('balance_of', args=('account',))
        ]
        return importlib.enforce_interface(m, interface)

    @export
    def load(name: str):
        importlib.import_module(name)

    @export
    def contract_exists(name: str):
        return importlib.is_contract(name)


def noisy():
    @export
    def shout(n: int):
        emit('Shout', {'n': n})

    @export
    def shout_then_fail():
        emit('Shout', {'n': 1})
        emit('Shout', 5)


def whoami():
    @export
    def identity():
        return {'this': ctx.this, 'caller': ctx.caller, 'signer': ctx.signer}


def relay():
    @export
    def identity():
        w = importlib.import_module('whoami')
        return w.identity()


class TestContractStdlib(TestCase):
    def setUp(self):
        self.c = ContractingClient(signer='stu')
        self.c.flush()

        self.c.submit(ledger)
        self.c.submit(reader)
        self.c.submit(inspector)

        self.reader = self.c.get_contract('reader')
        self.inspector = self.c.get_contract('inspector')

    def tearDown(self):
        self.c.flush()

    def test_cross_contract_read(self):
        self.assertEqual(self.reader.mirrored(account='stu'), 10)
        self.assertEqual(self.reader.mirrored(account='colin'), 0)

    def test_enforce_interface(self):
        self.assertTrue(self.inspector.has_ledger_shape(name='ledger'))
        self.assertFalse(self.inspector.has_ledger_shape(name='reader'))

    def test_is_contract(self):
        self.assertTrue(self.inspector.contract_exists(name='ledger'))
        self.assertFalse(self.inspector.contract_exists(name='stu'))
        self.assertFalse(self.inspector.contract_exists(name='_ledger'))

    def test_import_rejects_non_contracts(self):
        for name in ('os', '_ledger', 'nothing'):
            with self.assertRaises(ImportError):
                self.inspector.load(name=name)

    def test_emit(self):
        self.c.submit(noisy)
        n = self.c.get_contract('noisy')

        n.shout(n=3)

        self.assertEqual(self.c.events[-1].to_dict(), {'contract': 'noisy', 'event': 'Shout', 'data': {'n': 3}})

    def test_invalid_event_fails_and_drops_buffered_events(self):
        self.c.submit(noisy)
        n = self.c.get_contract('noisy')

        with self.assertRaises(AssertionError):
            n.shout_then_fail()

        self.assertEqual(self.c.events, [])

    def test_ctx_for_direct_call(self):
        self.c.submit(whoami)
        w = self.c.get_contract('whoami')

        self.assertEqual(w.identity(signer='colin'), {'this': 'whoami', 'caller': 'colin', 'signer': 'colin'})

    def test_ctx_for_cross_contract_call(self):
        self.c.submit(whoami)
        self.c.submit(relay)
        r = self.c.get_contract('relay')

        self.assertEqual(r.identity(signer='colin'), {'this': 'whoami', 'caller': 'relay', 'signer': 'colin'})
