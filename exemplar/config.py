DELIMITER = ':'
INDEX_SEPARATOR = '.'

CODE_KEY = '__code__'
COMPILED_KEY = '__compiled__'
OWNER_KEY = '__owner__'
TIME_KEY = '__submitted__'
DEVELOPER_KEY = '__developer__'

SUBMISSION_CONTRACT_NAME = 'submission'

# Resource limits
RECURSION_LIMIT = 1024

PRIVATE_METHOD_PREFIX = '__'
EXPORT_DECORATOR_STRING = 'export'
INIT_DECORATOR_STRING = 'construct'
INIT_FUNC_NAME = '__{}'.format(PRIVATE_METHOD_PREFIX)
VALID_DECORATORS = {EXPORT_DECORATOR_STRING, INIT_DECORATOR_STRING}

ORM_CLASS_NAMES = {'Variable', 'Hash'}

MAX_HASH_DIMENSIONS = 16
MAX_KEY_SIZE = 1024

# Token ledger
NFT_RECEIVED = '0x150b7a02'
INTERFACE_ID_ERC165 = '0x01ffc9a7'
INTERFACE_ID_ERC721 = '0x80ac58cd'
