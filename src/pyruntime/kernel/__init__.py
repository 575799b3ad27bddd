"""Side-effect-free resolution kernel for py_runtime targets."""
