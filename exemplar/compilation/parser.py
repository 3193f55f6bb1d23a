import ast


def methods_for_contract(contract_code: str):
    tree = ast.parse(contract_code)

    function_defs = [n for n in ast.walk(tree) if isinstance(n, ast.FunctionDef)]

    funcs = []
    for definition in function_defs:
        func_name = definition.name

        if func_name.startswith('__'):
            continue

        kwargs = []

        for arg in definition.args.args:
            kwargs.append({
                'name': arg.arg,
                'type': arg.annotation.id if isinstance(arg.annotation, ast.Name) else None
            })

        funcs.append({'name': func_name, 'arguments': kwargs})

    return funcs


def variables_for_contract(contract_code: str):
    tree = ast.parse(contract_code)

    variables = []
    hashes = []

    for node in tree.body:
        if not isinstance(node, ast.Assign) or not isinstance(node.value, ast.Call):
            continue

        func = node.value.func
        if not isinstance(func, ast.Name):
            continue

        name = node.targets[0].id.lstrip('_')

        if func.id == 'Variable':
            variables.append(name)
        elif func.id == 'Hash':
            hashes.append(name)

    return {
        'variables': variables,
        'hashes': hashes
    }
