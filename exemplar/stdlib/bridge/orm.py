from exemplar.db.orm import Variable, Hash
from exemplar.db.contract import Contract

# Datums resolve the runtime driver when the contract module is executed
exports = {
    'Variable': Variable,
    'Hash': Hash,
    '__Contract': Contract
}
