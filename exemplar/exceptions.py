
class ExemplarError(Exception):
    """
    The base exception for exemplar. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, msg=None, **kwargs):
        if msg is None:
            try:
                msg = self.fmt.format(**kwargs)
            except (KeyError, IndexError):
                msg = self.fmt
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class ContractExists(ExemplarError):
    """
    When attempting to set a contract, found that it
    already exists in the database

    :ivar contract_name: The name of the contract
                         submitted.
    """
    fmt = "Contract with name '{contract_name}' already exists in the database"


class CompilationException(ExemplarError):
    """
    The linter rejected the submitted source.

    :ivar violations: The list of violation strings
    """
    fmt = 'Contract failed linting: {violations}'

    def __init__(self, msg=None, **kwargs):
        super().__init__(msg, **kwargs)
        self.violations = kwargs.get('violations', [])


class ContractError(ExemplarError):
    """
    Base exception raised from inside contracts. Every subclass is
    visible to contract code and aborts the current transaction.
    """
    fmt = 'Contract execution failed'


class NotFound(ContractError):
    """
    The referenced token has no recorded owner.

    :ivar token_id: The token that was looked up
    """
    fmt = 'Token {token_id} does not exist'


class AlreadyExists(ContractError):
    """
    A mint collided with an existing token.

    :ivar token_id: The token that was minted twice
    """
    fmt = 'Token {token_id} already exists'


class Unauthorized(ContractError):
    """
    The caller lacks owner, delegate or operator standing.

    :ivar caller: The principal that attempted the action
    """
    fmt = '{caller} is not authorized'


class InvalidArgument(ContractError):
    """
    A null address or otherwise unusable value was passed.

    :ivar argument: The name of the offending argument
    """
    fmt = 'Invalid value for {argument}'


class UnsafeRecipient(ContractError):
    """
    A contract recipient did not acknowledge a safe transfer.

    :ivar recipient: The contract that failed to acknowledge
    """
    fmt = 'Recipient {recipient} did not acknowledge the transfer'


CONTRACT_ERRORS = (ContractError, NotFound, AlreadyExists, Unauthorized, InvalidArgument, UnsafeRecipient)


def define_error(name: str, fmt: str='', base=ContractError):
    """
    Creates a new ContractError subclass. Contracts cannot declare classes,
    so custom errors are built here and raised with keyword payloads.
    """
    assert name.isidentifier() and not name.startswith('_'), 'Invalid error name: {}'.format(name)
    assert issubclass(base, ContractError), 'Custom errors must derive from ContractError.'

    attrs = {'fmt': fmt or name}
    return type(name, (base,), attrs)
