"""
Hardware tests package.

Contains tests that require an arm controller on a serial port. These tests
are marked with @pytest.mark.hardware and are only executed when the
--run-hardware flag is provided.
"""
