# Contracts cannot declare classes, so error types are built with define_error and
# raised with keyword payloads that fill in the message.

InsufficientBalance = define_error('InsufficientBalance', 'Balance {balance} is less than {amount}')

balances = Hash(default_value=0)


@export
def deposit(amount: int):
    if amount <= 0:
        raise InvalidArgument(argument='amount')
    balances[ctx.caller] += amount


@export
def withdraw(amount: int):
    balance = balances[ctx.caller]
    if balance < amount:
        raise InsufficientBalance(balance=balance, amount=amount)
    balances[ctx.caller] = balance - amount


@export
def check_require(value: int):
    assert value > 10, 'Input must be greater than 10'


@export
def check_revert(value: int):
    if value <= 10:
        raise ContractError('Input must be greater than 10')


@export
def balance_of(account: str):
    return balances[account]
