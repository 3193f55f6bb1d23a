from unittest import TestCase
from datetime import datetime
from exemplar.db.encoder import encode, decode, make_key, encode_kv, MAX_INT


class TestEncode(TestCase):
    def test_int_to_bytes(self):
        i = 1000
        b = '1000'

        self.assertEqual(encode(i), b)

    def test_str_to_bytes(self):
        s = 'hello'
        b = '"hello"'

        self.assertEqual(encode(s), b)

    def test_decode_bytes_to_int(self):
        b = '1234'
        i = 1234

        self.assertEqual(decode(b), i)

    def test_decode_bytes_to_str(self):
        b = '"howdy"'
        s = 'howdy'

        self.assertEqual(decode(b), s)

    def test_bool_is_not_treated_as_int(self):
        self.assertEqual(encode(True), 'true')
        self.assertTrue(decode('true') is True)

    def test_big_int_is_tagged(self):
        big = 2 ** 256 - 1

        self.assertEqual(encode(big), '{"__big_int__":"%d"}' % big)
        self.assertEqual(decode(encode(big)), big)

    def test_int_at_boundary_is_tagged(self):
        self.assertIn('__big_int__', encode(MAX_INT))
        self.assertEqual(encode(MAX_INT - 1), str(MAX_INT - 1))

    def test_big_ints_in_nested_structures(self):
        d = {'ids': [2 ** 70, 1], 'inner': {'id': 2 ** 80}}

        self.assertEqual(decode(encode(d)), d)

    def test_bytes_encoded_as_hex(self):
        self.assertEqual(encode(b'\x00\xff'), '{"__bytes__":"00ff"}')
        self.assertEqual(decode('{"__bytes__":"00ff"}'), b'\x00\xff')

    def test_datetime_encoded(self):
        d = datetime(2019, 1, 1, 12, 30, 5)

        self.assertEqual(encode(d), '{"__time__":[2019,1,1,12,30,5,0]}')
        self.assertEqual(decode(encode(d)), d)

    def test_decode_none_returns_none(self):
        self.assertIsNone(decode(None))

    def test_decode_garbage_returns_none(self):
        self.assertIsNone(decode('{not json'))

    def test_make_key(self):
        self.assertEqual(make_key('nft', 'owners'), 'nft.owners')
        self.assertEqual(make_key('nft', 'operators', ['stu', 1]), 'nft.operators:stu:1')

    def test_encode_kv(self):
        k, v = encode_kv('nft.owners:1', 'stu')

        self.assertEqual(k, b'nft.owners:1')
        self.assertEqual(v, b'"stu"')
