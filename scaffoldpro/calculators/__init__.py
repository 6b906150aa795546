"""
Deterministic scaffolding quantity engine.

Pure Python math. No I/O, no hidden state.
Given a CalculationInput (DimensionForm or AreaForm), produce a bill of
materials with quantities, total weight and load capacity.
"""
