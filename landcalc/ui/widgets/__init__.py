from .components import NumberLineEdit, NumericTableWidgetItem, ResultTable
