count = Variable(default_value=0)


@export
def get():
    return count.get()


@export
def inc():
    value = count.get() + 1
    count.set(value)

    emit('CountChanged', {'count': value})
    return value


@export
def dec():
    value = count.get()
    if value == 0:
        raise InvalidArgument(argument='count')

    count.set(value - 1)

    emit('CountChanged', {'count': value - 1})
    return value - 1
