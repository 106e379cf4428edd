"""
Module: config
Description: Runtime settings and step input loading.
"""
