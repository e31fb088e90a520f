"""
The MODEL layer contains the plain value types produced by the style builder.
It has NO knowledge of the GUI (Qt); the `division.qt` package converts these
values into toolkit objects.
"""
