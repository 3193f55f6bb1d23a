num = Variable(default_value=0)


@export
def set_num(value: int):
    assert isinstance(value, int) and value >= 0, 'Value must be a non-negative integer.'
    num.set(value)

    emit('NumChanged', {'value': value})


@export
def get_num():
    return num.get()
