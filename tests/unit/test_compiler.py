from unittest import TestCase
from exemplar.compilation.compiler import ContractingCompiler
from exemplar.exceptions import CompilationException
import ast


class TestCompiler(TestCase):
    def setUp(self):
        self.c = ContractingCompiler(module_name='token')

    def functions(self, code):
        tree = ast.parse(self.c.parse_to_code(code))
        return {n.name: n for n in ast.walk(tree) if isinstance(n, ast.FunctionDef)}

    def test_exported_function_gets_export_context(self):
        code = '''
@export
def a():
    return 1
'''
        funcs = self.functions(code)

        decorator = funcs['a'].decorator_list[0]
        self.assertEqual(decorator.func.id, '__export')
        self.assertEqual(decorator.args[0].value, 'token')

    def test_private_function_is_privatized(self):
        code = '''
def helper():
    return 1

@export
def a():
    return helper()
'''
        funcs = self.functions(code)

        self.assertIn('__helper', funcs)
        self.assertNotIn('helper', funcs)

        call = funcs['a'].body[0].value
        self.assertEqual(call.func.id, '__helper')

    def test_private_call_inside_assignment_is_privatized(self):
        code = '''
def helper():
    return 1

@export
def a():
    b = helper()
    return b
'''
        funcs = self.functions(code)

        assign = funcs['a'].body[0]
        self.assertEqual(assign.value.func.id, '__helper')

    def test_constructor_renamed(self):
        code = '''
@construct
def seed():
    pass

@export
def a():
    pass
'''
        funcs = self.functions(code)

        self.assertIn('____', funcs)
        self.assertEqual(funcs['____'].decorator_list, [])

    def test_orm_declarations_get_contract_and_name(self):
        code = '''
owners = Hash()

@export
def a():
    pass
'''
        tree = ast.parse(self.c.parse_to_code(code))
        call = tree.body[0].value

        keywords = {k.arg: k.value.value for k in call.keywords}
        self.assertEqual(keywords, {'contract': 'token', 'name': 'owners'})

    def test_lint_failure_raises(self):
        code = '''
def a():
    pass
'''
        with self.assertRaises(CompilationException) as e:
            self.c.parse_to_code(code)

        self.assertIn('Line 0: S13- No valid contracting decorator found', e.exception.violations)

    def test_compile_returns_code_object(self):
        code = '''
@export
def a():
    return 1
'''
        compiled = self.c.compile(code)
        self.assertEqual(type(compiled).__name__, 'code')

    def test_state_reset_between_parses(self):
        code = '''
def helper():
    return 1

@export
def a():
    return helper()
'''
        self.c.parse(code)

        self.assertEqual(self.c.private_names, set())
        self.assertEqual(self.c.visited_names, set())
