"""
paretofront - Pareto non-dominated set extraction for named score vectors.

Each datum carries a fixed-length vector of scores where higher is better on
every dimension. The strict filter keeps every datum not dominated by another
one; the fuzzy filter first quantizes scores so small differences count as ties.
"""

__version__ = "0.1.0"
