"""
Scanner core: configuration, probing and result rendering.
"""
