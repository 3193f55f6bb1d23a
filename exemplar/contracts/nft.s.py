# Non-fungible token ledger. Token ids are caller supplied integers in [0, 2**256) and a
# token exists exactly while it has an owner. The null address is None.

RECEIVED = '0x150b7a02'
INTERFACES = {'0x01ffc9a7', '0x80ac58cd'}
MAX_TOKEN_ID = 2 ** 256

owners = Hash()
balances = Hash(default_value=0)
approvals = Hash()
operators = Hash(default_value=False)


def require_token_id(token_id):
    if type(token_id) != int or token_id < 0 or token_id >= MAX_TOKEN_ID:
        raise InvalidArgument(argument='token_id')


def require_address(account, argument):
    # Addresses become state keys, so key separators are refused
    if type(account) != str or account == '' or ':' in account or '.' in account:
        raise InvalidArgument(argument=argument)


def require_owner(token_id):
    require_token_id(token_id)

    owner = owners[token_id]
    if owner is None:
        raise NotFound(token_id=token_id)
    return owner


def is_authorized(owner, spender, token_id):
    return spender == owner or operators[owner, spender] is True or approvals[token_id] == spender


@export
def supports_interface(interface_id: str):
    return interface_id in INTERFACES


@export
def owner_of(token_id: int):
    return require_owner(token_id)


@export
def balance_of(account: str):
    require_address(account, 'account')
    return balances[account]


@export
def set_approval_for_all(operator: str, approved: bool):
    require_address(operator, 'operator')

    if type(approved) != bool:
        raise InvalidArgument(argument='approved')

    operators[ctx.caller, operator] = approved

    emit('ApprovalForAll', {'owner': ctx.caller, 'operator': operator, 'approved': approved})


@export
def is_approved_for_all(owner: str, operator: str):
    require_address(owner, 'owner')
    require_address(operator, 'operator')

    return operators[owner, operator] is True


@export
def approve(spender: str, token_id: int):
    owner = require_owner(token_id)

    if spender is not None:
        require_address(spender, 'spender')

    if ctx.caller != owner and operators[owner, ctx.caller] is not True:
        raise Unauthorized(caller=ctx.caller)

    approvals[token_id] = spender

    emit('Approval', {'owner': owner, 'spender': spender, 'token_id': token_id})


@export
def get_approved(token_id: int):
    require_owner(token_id)
    return approvals[token_id]


def transfer(sender, to, token_id):
    require_token_id(token_id)

    if owners[token_id] != sender or sender is None:
        raise Unauthorized(caller=ctx.caller)

    require_address(to, 'to')

    if not is_authorized(sender, ctx.caller, token_id):
        raise Unauthorized(caller=ctx.caller)

    balances[sender] -= 1
    balances[to] += 1
    owners[token_id] = to
    approvals[token_id] = None

    emit('Transfer', {'from': sender, 'to': to, 'token_id': token_id})


@export
def transfer_from(sender: str, to: str, token_id: int):
    transfer(sender, to, token_id)


@export
def safe_transfer_from(sender: str, to: str, token_id: int, data: Any=None):
    operator = ctx.caller

    transfer(sender, to, token_id)

    # Accounts acknowledge implicitly. Contracts must answer the callback with the sentinel.
    if importlib.is_contract(to):
        receiver = importlib.import_module(to)

        callback = [importlib.Func('on_nft_received', args=('operator', 'sender', 'token_id', 'data'))]
        if not importlib.enforce_interface(receiver, callback):
            raise UnsafeRecipient(recipient=to)

        response = receiver.on_nft_received(operator=operator, sender=sender, token_id=token_id, data=data)
        if response != RECEIVED:
            raise UnsafeRecipient(recipient=to)


@export
def mint(to: str, token_id: int):
    require_address(to, 'to')
    require_token_id(token_id)

    if owners[token_id] is not None:
        raise AlreadyExists(token_id=token_id)

    owners[token_id] = to
    balances[to] += 1

    emit('Transfer', {'from': None, 'to': to, 'token_id': token_id})


@export
def burn(token_id: int):
    owner = require_owner(token_id)

    if ctx.caller != owner:
        raise Unauthorized(caller=ctx.caller)

    balances[owner] -= 1
    owners[token_id] = None
    approvals[token_id] = None

    emit('Transfer', {'from': owner, 'to': None, 'token_id': token_id})
