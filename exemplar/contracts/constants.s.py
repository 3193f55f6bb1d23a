# Values fixed in the source. They are never written to state.

MY_ADDRESS = 'a7c5bf4d3e1b2f8e09d6c4a3b2f1e0d9'
MY_UINT = 123
DECIMALS = 18


@export
def my_address():
    return MY_ADDRESS


@export
def my_uint():
    return MY_UINT


@export
def scaled(amount: int):
    return amount * 10 ** DECIMALS
