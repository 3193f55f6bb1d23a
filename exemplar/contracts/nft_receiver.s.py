# Recipient contract for safe transfers. Records what arrived and answers with the
# configured response, which is the ledger's sentinel unless changed for testing.

RECEIVED = '0x150b7a02'

response = Variable()
received = Hash()
count = Variable(default_value=0)


@construct
def seed(reply: str='0x150b7a02'):
    response.set(reply)


@export
def set_response(reply: str):
    response.set(reply)


@export
def on_nft_received(operator: str, sender: str, token_id: int, data: Any):
    received[ctx.caller, token_id] = {'operator': operator, 'sender': sender, 'data': data}
    count.set(count.get() + 1)

    emit('Received', {'ledger': ctx.caller, 'operator': operator, 'sender': sender, 'token_id': token_id})

    return response.get()


@export
def forward(ledger: str, to: str, token_id: int):
    token = importlib.import_module(ledger)
    token.transfer_from(sender=ctx.this, to=to, token_id=token_id)
