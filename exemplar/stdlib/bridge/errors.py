from exemplar.exceptions import CONTRACT_ERRORS, define_error

exports = {e.__name__: e for e in CONTRACT_ERRORS}
exports['define_error'] = define_error
