"""
curves3d
========
Parametric 3D curves (circle, ellipse, helix) with closed-form position and
derivative evaluation, plus a small demonstration driver.
"""
