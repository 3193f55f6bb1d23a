# Values written once by the constructor. No exported function writes them again.

my_address = Variable()
my_uint = Variable()


@construct
def seed(value: int=123):
    my_address.set(ctx.caller)
    my_uint.set(value)


@export
def get_address():
    return my_address.get()


@export
def get_uint():
    return my_uint.get()
