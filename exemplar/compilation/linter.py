import ast
import sys

from stdlib_list import stdlib_list

from .. import config
from ..logger import get_logger
from .whitelists import ALLOWED_AST_TYPES, ALLOWED_ANNOTATION_TYPES, VIOLATION_TRIGGERS, ILLEGAL_BUILTINS

# Nodes with a dedicated violation of their own
_REPORTED_ELSEWHERE = (ast.ClassDef, ast.AsyncFunctionDef, ast.ImportFrom)

log = get_logger('Linter')


def annotation_name(annotation):
    if annotation is None:
        return None
    if isinstance(annotation, ast.Name):
        return annotation.id
    return type(annotation).__name__


class Linter(ast.NodeVisitor):
    """
    Walks a contract's module tree and collects every rule it breaks.
    ``check`` returns the violations as ``"Line N: Sx- ..."`` strings, or
    None for a clean contract.
    """
    def __init__(self):
        self.stdlib = set(stdlib_list(f'{sys.version_info.major}.{sys.version_info.minor}'))
        self._reset()

    def _reset(self):
        self._violations = []
        self._lineno = 0
        self._has_export = False
        self._has_constructor = False
        self._orm_names = set()
        self._arguments = []

    def _fail(self, lineno, trigger, suffix=''):
        self._violations.append('Line {}: {}{}'.format(lineno, VIOLATION_TRIGGERS[trigger], suffix))

    def _fail_with_detail(self, lineno, trigger, detail=None):
        message = 'Line {} : {}'.format(lineno, VIOLATION_TRIGGERS[trigger])
        if detail is not None:
            message += ' : {}'.format(detail)
        self._violations.append(message)

    def ast_types(self, t, lnum):
        if type(t) not in ALLOWED_AST_TYPES:
            self._fail_with_detail(lnum, 0, type(t).__name__)

    def not_system_variable(self, name, lineno):
        if name.startswith('_'):
            self._fail_with_detail(lineno, 1, name)

    def visit(self, node):
        self._lineno = getattr(node, 'lineno', self._lineno)
        if not isinstance(node, _REPORTED_ELSEWHERE):
            self.ast_types(node, self._lineno)
        return super().visit(node)

    def visit_Name(self, node):
        self.not_system_variable(node.id, node.lineno)
        self.generic_visit(node)

    def visit_Attribute(self, node):
        self.not_system_variable(node.attr, node.lineno)
        self.generic_visit(node)

    def visit_Import(self, node):
        for alias in node.names:
            if alias.name in self.stdlib:
                self._fail(node.lineno, 13)

    def visit_ImportFrom(self, node):
        self._fail(node.lineno, 3)

    def visit_ClassDef(self, node):
        self._fail(node.lineno, 5)
        self.generic_visit(node)

    def visit_AsyncFunctionDef(self, node):
        self._fail(node.lineno, 6)
        self.generic_visit(node)

    def visit_Assign(self, node):
        call = node.value
        if isinstance(call, ast.Call) and isinstance(call.func, ast.Name) and call.func.id in config.ORM_CLASS_NAMES:
            # contract and name are injected by the compiler
            if any(k.arg in ('contract', 'name') for k in call.keywords):
                self._fail(node.lineno, 10)

            if len(node.targets) > 1 or not isinstance(node.targets[0], ast.Name):
                self._fail(node.lineno, 11)
            else:
                self._orm_names.add(node.targets[0].id)

        self.generic_visit(node)

    def visit_Call(self, node):
        if isinstance(node.func, ast.Name) and node.func.id in ILLEGAL_BUILTINS:
            self._fail(node.lineno, 13)

        self.generic_visit(node)

    def visit_FunctionDef(self, node):
        if any(isinstance(item, (ast.Import, ast.ImportFrom)) for item in node.body):
            self._fail(node.lineno, 2)

        if len(node.decorator_list) > 1:
            self._fail(node.lineno, 9, ': Detected: {} MAX limit: 1'.format(len(node.decorator_list)))

        exported = False
        for decorator in node.decorator_list:
            name = decorator.id if isinstance(decorator, ast.Name) else None

            if name not in config.VALID_DECORATORS:
                self._fail(node.lineno, 7, ': valid list: {}'.format(sorted(config.VALID_DECORATORS)))
            elif name == config.EXPORT_DECORATOR_STRING:
                exported = True
            elif self._has_constructor:
                self._fail(node.lineno, 8)
            else:
                self._has_constructor = True

        self._has_export = self._has_export or exported

        for a in node.args.args:
            self._arguments.append((a.arg, node.lineno))

            # Exported arguments arrive from outside and must declare a whitelisted type
            if exported:
                t = annotation_name(a.annotation)
                if t is None:
                    self._fail_with_detail(node.lineno, 16)
                elif t not in ALLOWED_ANNOTATION_TYPES:
                    self._fail_with_detail(node.lineno, 15, t)

        if exported and node.returns is not None:
            self._fail_with_detail(node.lineno, 17, ast.dump(node.returns))

        self.generic_visit(node)

    def check(self, ast_tree):
        self._reset()
        self.visit(ast_tree)

        for name, lineno in self._arguments:
            if name in self._orm_names:
                self._fail(lineno, 14)

        if not self._has_export:
            self._fail(0, 12)

        if not self._violations:
            return None

        log.debug('Linting failed with {} violations'.format(len(self._violations)))
        return self._violations
