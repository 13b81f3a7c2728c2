"""
Variable substitution module.
Renders ${NAME} templates against the process environment.
"""

from .substitution import EnvSubstitutor, SubstitutionResult, envsubst

__all__ = ['EnvSubstitutor', 'SubstitutionResult', 'envsubst']
