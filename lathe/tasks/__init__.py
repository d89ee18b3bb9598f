"""Built-in tasks.

A task named "foo" is the function foo in module lathe.tasks.foo. Plugins
add tasks the same way through the lathe_tasks namespace package.
"""
