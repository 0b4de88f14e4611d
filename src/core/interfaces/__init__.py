"""Contratos (Protocol) del Core.

Los adaptadores HTTP los implementan; los tests usan dobles que también.
"""
