"""
Flight Search - origin/destination/date lookup over a static flight catalog.

Layers follow the Ports and Adapters layout:
- schemas: data contracts (dataclasses + Pandera DataFrame models)
- ports: abstract catalog interface
- adapters: in-memory catalog over the shipped mock dataset
- services: search validation and filtering
- application: facade wiring the defaults together
"""
