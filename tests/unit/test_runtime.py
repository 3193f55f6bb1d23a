from unittest import TestCase
from exemplar.execution.runtime import Context, Event, rt


def state(this, caller='stu'):
    return {'this': this, 'caller': caller, 'signer': 'stu', 'owner': None}


class TestContext(TestCase):
    def setUp(self):
        self.c = Context(state('nft'), maxlen=3)

    def test_base_state(self):
        self.assertEqual(self.c.this, 'nft')
        self.assertEqual(self.c.caller, 'stu')
        self.assertEqual(self.c.signer, 'stu')
        self.assertIsNone(self.c.owner)

    def test_add_state_on_context_change(self):
        self.assertTrue(self.c._add_state(state('receiver', caller='nft')))

        self.assertEqual(self.c.this, 'receiver')
        self.assertEqual(self.c.caller, 'nft')

    def test_same_contract_does_not_push(self):
        self.assertFalse(self.c._add_state(state('nft')))
        self.assertEqual(self.c._state, [])

    def test_pop_state_returns_to_previous(self):
        self.c._add_state(state('receiver', caller='nft'))
        self.c._pop_state()

        self.assertEqual(self.c.this, 'nft')

    def test_pop_empty_is_noop(self):
        self.c._pop_state()
        self.assertEqual(self.c.this, 'nft')

    def test_depth_limit(self):
        self.c._add_state(state('a'))
        self.c._add_state(state('b'))
        self.c._add_state(state('c'))

        with self.assertRaises(RecursionError):
            self.c._add_state(state('d'))

    def test_reset(self):
        self.c._add_state(state('a'))
        self.c._reset()

        self.assertEqual(self.c.this, 'nft')


class TestRuntimeEvents(TestCase):
    def setUp(self):
        rt.set_up()

    def tearDown(self):
        rt.clean_up()
        rt.set_up()

    def test_emit_tags_current_contract(self):
        rt.context._base_state = state('nft')
        rt.emit('Transfer', {'from': None, 'to': 'stu', 'token_id': 1})

        self.assertEqual(rt.take_events(), [Event('nft', 'Transfer', {'from': None, 'to': 'stu', 'token_id': 1})])

    def test_take_events_drains_buffer(self):
        rt.context._base_state = state('counter')
        rt.emit('CountChanged', {'count': 1})

        rt.take_events()

        self.assertEqual(rt.take_events(), [])

    def test_set_up_drops_pending_events(self):
        rt.context._base_state = state('counter')
        rt.emit('CountChanged', {'count': 1})

        rt.set_up()

        self.assertEqual(rt.events, [])

    def test_event_to_dict(self):
        e = Event('wallet', 'Deposit', {'amount': 5})

        self.assertEqual(e.to_dict(), {'contract': 'wallet', 'event': 'Deposit', 'data': {'amount': 5}})
