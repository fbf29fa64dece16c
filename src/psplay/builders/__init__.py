"""Domain builders — one module per host object domain.

Builders are pure functions returning CommandEnvelope. They check the
domain of every reference they receive via ``require_domain`` and never
mutate an envelope after returning it.
"""
