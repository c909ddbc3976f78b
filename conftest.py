"""
# Provide the contention &Test as the `test` fixture for the test modules.
"""
import pytest

from filepaths.test import library as testlib

@pytest.fixture
def test(request):
	return testlib.Test(request.node.nodeid, request.function)
