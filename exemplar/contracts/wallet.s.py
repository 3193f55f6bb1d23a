# A wallet anyone can pay into and only its owner can draw from.

owner = Variable()
balance = Variable(default_value=0)


@construct
def seed():
    owner.set(ctx.caller)


@export
def deposit(amount: int):
    if amount <= 0:
        raise InvalidArgument(argument='amount')

    balance.set(balance.get() + amount)

    emit('Deposit', {'sender': ctx.caller, 'amount': amount})


@export
def withdraw(amount: int):
    if ctx.caller != owner.get():
        raise Unauthorized(caller=ctx.caller)

    if amount <= 0 or amount > balance.get():
        raise InvalidArgument(argument='amount')

    balance.set(balance.get() - amount)

    emit('Withdrawal', {'owner': ctx.caller, 'amount': amount})


@export
def get_balance():
    return balance.get()


@export
def get_owner():
    return owner.get()
