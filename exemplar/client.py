from exemplar.execution.executor import Executor
from exemplar.db.driver import ContractDriver
from exemplar.db.orm import Variable, Hash
from exemplar.compilation.compiler import ContractingCompiler
from exemplar.compilation.parser import methods_for_contract
from exemplar.logger import get_logger
from functools import partial
from types import FunctionType
import ast
import inspect
import astor
import autopep8
import os

from . import config

CONTRACTS_DIR = os.path.join(os.path.dirname(__file__), 'contracts')

log = get_logger('Client')


def contract_name_for_file(path):
    # nft.s.py -> nft
    return os.path.basename(path).split('.')[0]


class AbstractContract:
    """
    Stand-in for a submitted contract. Every exported function becomes a
    method that runs through the executor; ``signer=`` and ``environment=``
    override the defaults per call. Stored variables and hashes are
    readable as attributes.
    """
    def __init__(self, name, signer, environment, executor: Executor, funcs, client=None):
        self.name = name
        self.signer = signer
        self.environment = environment
        self.executor = executor
        self.client = client

        for func in funcs:
            # Omitted arguments are passed as None
            arguments = dict.fromkeys(a['name'] for a in func['arguments'])
            setattr(self, func['name'], partial(self._call, func['name'], **arguments))

    def keys(self):
        return self.executor.driver.get_contract_keys(self.name)

    def _call(self, _function, signer=None, environment=None, **kwargs):
        output = self.executor.execute(sender=signer or self.signer,
                                       contract_name=self.name,
                                       function_name=_function,
                                       kwargs=kwargs,
                                       environment=environment or self.environment)

        if self.client is not None:
            self.client.publish(output['events'])

        if output['status_code'] == 1:
            raise output['result']

        return output['result']

    def __getattr__(self, item):
        executor = self.__dict__.get('executor')
        if executor is None:
            raise AttributeError(item)

        driver = executor.driver
        key = driver.make_key(self.name, item)

        if driver.get(key) is not None:
            return Variable(self.name, item, driver=driver)

        if driver.keys(prefix=key + config.DELIMITER):
            return Hash(self.name, item, driver=driver)

        raise AttributeError('{} has no attribute {}'.format(self.name, item))


class ContractingClient:
    def __init__(self, signer='sys',
                 submission_filename=os.path.join(CONTRACTS_DIR, 'submission.s.py'),
                 driver=None,
                 compiler=None,
                 environment=None):

        self.raw_driver = driver if driver is not None else ContractDriver()
        self.executor = Executor(driver=self.raw_driver)
        self.signer = signer
        self.compiler = compiler or ContractingCompiler()
        self.submission_filename = submission_filename
        self.environment = environment or {}

        # Events of committed calls, oldest first
        self.events = []
        self._subscribers = []

        self.submission_contract = None
        if self.submission_filename is not None or self.raw_driver.get_contract(config.SUBMISSION_CONTRACT_NAME):
            self.set_submission_contract()

    def set_submission_contract(self, filename=None):
        filename = filename or self.submission_filename

        if filename is not None:
            with open(filename) as f:
                code = f.read()

            self.raw_driver.set_contract(name=config.SUBMISSION_CONTRACT_NAME, code=code, overwrite=True)
            self.raw_driver.commit()

        assert self.raw_driver.get_contract(config.SUBMISSION_CONTRACT_NAME) is not None, \
            'No submission contract provided or found in state.'

        self.submission_contract = self.get_contract(config.SUBMISSION_CONTRACT_NAME)

    def flush(self):
        self.raw_driver.flush()
        self.events = []

        if self.submission_filename is not None:
            self.set_submission_contract()
        else:
            self.submission_contract = None

    def subscribe(self, callback):
        self._subscribers.append(callback)

    def publish(self, events):
        for event in events:
            self.events.append(event)
            for callback in self._subscribers:
                callback(event)

    def get_contract(self, name):
        code = self.raw_driver.get_contract(name)

        if code is None:
            return None

        return AbstractContract(name=name,
                                signer=self.signer,
                                environment=self.environment,
                                executor=self.executor,
                                funcs=methods_for_contract(code),
                                client=self)

    def closure_to_code_string(self, f):
        source = autopep8.fix_code(inspect.getsource(f))
        tree = ast.parse(source)

        # The enclosing function only names the contract. Its body is the contract.
        assert len(tree.body) == 1 and isinstance(tree.body[0], ast.FunctionDef), \
            'Expected a single function definition.'

        closure = tree.body[0]
        tree.body = closure.body

        return astor.to_source(tree), closure.name

    def _source(self, f):
        if isinstance(f, FunctionType):
            return self.closure_to_code_string(f)
        return f, None

    def lint(self, f):
        code, _ = self._source(f)
        return self.compiler.linter.check(ast.parse(code))

    def compile(self, f):
        code, _ = self._source(f)
        return self.compiler.parse_to_code(code)

    def submit(self, f, name=None, owner=None, constructor_args={}, signer=None):
        assert self.submission_contract is not None, 'No submission contract set.'

        code, closure_name = self._source(f)
        name = name or closure_name

        assert name is not None, 'No name provided.'

        log.debug('Submitting {}'.format(name))

        self.submission_contract.submit_contract(name=name, code=code, owner=owner,
                                                 constructor_args=constructor_args,
                                                 signer=signer or self.signer)

    def submit_file(self, path, name=None, owner=None, constructor_args={}, signer=None):
        if not os.path.isabs(path) and not os.path.exists(path):
            path = os.path.join(CONTRACTS_DIR, path)

        with open(path) as f:
            code = f.read()

        self.submit(code, name=name or contract_name_for_file(path), owner=owner,
                    constructor_args=constructor_args, signer=signer)

    def get_contracts(self):
        suffix = config.INDEX_SEPARATOR + config.CODE_KEY
        return [key[:-len(suffix)] for key in self.raw_driver.keys() if key.endswith(suffix)]

    def get_var(self, contract, variable, arguments=[]):
        return self.raw_driver.get_var(contract, variable, arguments)

    def set_var(self, contract, variable, arguments=[], value=None):
        self.raw_driver.set_var(contract, variable, arguments, value)
        self.raw_driver.commit()
