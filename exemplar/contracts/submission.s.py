@__export('submission')
def submit_contract(name: str, code: str, owner: Any=None, constructor_args: dict={}):
    assert isinstance(name, str) and name.isidentifier(), 'Contract name must be a valid identifier.'
    assert not name.startswith('_'), 'Cannot submit a private contract.'

    if constructor_args is None:
        constructor_args = {}

    __Contract().submit(
        name=name,
        code=code,
        owner=owner,
        constructor_args=constructor_args
    )
