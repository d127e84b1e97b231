"""
Estimation engine — one calculator per trade.

Pure Python math. Each calculator takes the posted form fields and returns
a result dict; bad input raises CalculatorInputError instead of producing
a silent zero.
"""
