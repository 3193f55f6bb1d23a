import ast
import astor

from exemplar import config
from exemplar.exceptions import CompilationException
from exemplar.compilation.linter import Linter


class ContractingCompiler(ast.NodeTransformer):
    def __init__(self, module_name='__main__', linter=None):
        self.module_name = module_name
        self.linter = linter or Linter()
        self.lint_alerts = None
        self.private_names = set()
        self.visited_names = set()  # store the method visits

    def parse(self, source: str, lint=True):
        tree = ast.parse(source)

        if lint:
            self.lint_alerts = self.linter.check(tree)
            if self.lint_alerts is not None:
                raise CompilationException(violations=self.lint_alerts)

        tree = self.visit(tree)

        # check all visited nodes and see if they are actually private
        for node in self.visited_names:
            if node.id in self.private_names:
                node.id = self.privatize(node.id)

        ast.fix_missing_locations(tree)

        # reset state
        self.private_names = set()
        self.visited_names = set()

        return tree

    @staticmethod
    def privatize(s):
        return '{}{}'.format(config.PRIVATE_METHOD_PREFIX, s)

    def compile(self, source: str, lint=True):
        tree = self.parse(source, lint=lint)

        compiled_code = compile(tree, '<compilation>', 'exec')

        return compiled_code

    def parse_to_code(self, source, lint=True):
        tree = self.parse(source, lint=lint)
        code = astor.to_source(tree)
        return code

    def visit_FunctionDef(self, node):
        export = False

        # Presumes all decorators are valid, as caught by linter.
        if node.decorator_list:
            # Presumes that a single decorator is passed. This is caught by the linter.
            decorator = node.decorator_list.pop()

            # change the name of the init function to '____' so it is uncallable except once
            if decorator.id == config.INIT_DECORATOR_STRING:
                node.name = config.INIT_FUNC_NAME
            elif decorator.id == config.EXPORT_DECORATOR_STRING:
                export = True
        else:
            self.private_names.add(node.name)
            node.name = self.privatize(node.name)

        self.generic_visit(node)

        # exported functions push a new context frame when called from another contract
        if export:
            node.decorator_list.append(
                ast.Call(func=ast.Name(id='__export', ctx=ast.Load()),
                         args=[ast.Constant(value=self.module_name)],
                         keywords=[])
            )

        return node

    def visit_Assign(self, node):
        if isinstance(node.value, ast.Call) and isinstance(node.value.func, ast.Name) and \
                node.value.func.id in config.ORM_CLASS_NAMES:
            node.value.keywords.append(ast.keyword(arg='contract', value=ast.Constant(value=self.module_name)))
            node.value.keywords.append(ast.keyword(arg='name', value=ast.Constant(value=node.targets[0].id)))

        self.generic_visit(node)
        return node

    def visit_Name(self, node):
        self.visited_names.add(node)
        return node
