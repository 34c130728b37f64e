"""Constantes compartilhadas pelo motor de condições."""

# Operações lógicas -----------------------------------------------------------
OPERATION_CONJUNCTION = "conjunction"
OPERATION_DISJUNCTION = "disjunction"
OPERATION_DISJUNCTION_WITH_EXTRA_CONDITION = "disjunctionWithExtraCondition"

DEFAULT_OPERATION = OPERATION_CONJUNCTION

# Eventos emitidos pela ConditionCollection -----------------------------------
EVENT_BEFORE_ADD = "beforeAdd"
EVENT_AFTER_ADD = "afterAdd"
EVENT_BEFORE_REMOVE = "beforeRemove"
EVENT_AFTER_REMOVE = "afterRemove"
EVENT_BEFORE_CLEAR = "beforeClear"
EVENT_AFTER_CLEAR = "afterClear"
EVENT_BEFORE_CLEAN = "beforeClean"
EVENT_AFTER_CLEAN = "afterClean"

COLLECTION_EVENTS = (
    EVENT_BEFORE_ADD,
    EVENT_AFTER_ADD,
    EVENT_BEFORE_REMOVE,
    EVENT_AFTER_REMOVE,
    EVENT_BEFORE_CLEAR,
    EVENT_AFTER_CLEAR,
    EVENT_BEFORE_CLEAN,
    EVENT_AFTER_CLEAN,
)

# Metadados de célula ---------------------------------------------------------
META_TYPE = "type"
META_DATE_FORMAT = "date_format"

CELL_TYPE_TEXT = "text"
CELL_TYPE_NUMERIC = "numeric"
CELL_TYPE_DATE = "date"
