"""Classic object-oriented design patterns, one module per pattern."""