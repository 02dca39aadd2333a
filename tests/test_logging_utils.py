import logging

import pytest

from sceneblocks import BLOCKS, Variable, Workspace, workspace_to_code
from sceneblocks.ast import Fragment
from sceneblocks.logging_utils import apply_debug_logging, debug_log_call, summarize
from sceneblocks.sockets import SocketTag

from helpers import chain


def test_summaries_stay_short():
    head = chain(BLOCKS.new_block('setSkyColor', 'a'), BLOCKS.new_block('setSkyColor', 'b'))

    assert summarize(head) == '<setSkyColor a -> b>'
    assert summarize(Workspace([head], [Variable('v', 'lamp', SocketTag.LIGHT)])) == 'Workspace(1 top-level, 1 variable(s))'
    assert summarize(Fragment('5', 0)) == "Fragment('5', order=0)"
    assert summarize(Variable('v', 'lamp')) == "Variable('lamp': any)"
    assert len(summarize('x' * 500)) <= 80


def test_debug_log_call_records_arguments_and_result(caplog):
    logger = logging.getLogger('sceneblocks.tests')

    @debug_log_call(logger)
    def double(value):
        return value * 2

    with caplog.at_level(logging.DEBUG, logger='sceneblocks.tests'):
        assert double(4) == 8

    assert '-> test_debug_log_call_records_arguments_and_result.<locals>.double(4)' in caplog.text
    assert '= 8' in caplog.text


def test_debug_log_call_reraises(caplog):
    logger = logging.getLogger('sceneblocks.tests')

    @debug_log_call(logger, name='fail')
    def fail():
        raise KeyError('missing')

    with caplog.at_level(logging.DEBUG, logger='sceneblocks.tests'), pytest.raises(KeyError):
        fail()

    assert '<- fail raised KeyError' in caplog.text


def test_apply_debug_logging_wraps_module_functions_only():
    logger = logging.getLogger('sceneblocks.tests')

    def public():
        return 1

    def _private():
        return 2

    namespace = {'__name__': public.__module__, 'public': public, '_private': _private, 'dumps': repr}
    apply_debug_logging(namespace, logger=logger)

    assert namespace['public'] is not public
    assert namespace['public'].__wrapped__ is public
    assert namespace['_private'] is _private
    assert namespace['dumps'] is repr


def test_compiler_entry_points_are_traced(caplog):
    sky = BLOCKS.new_block('setSkyColor', 'sky')

    with caplog.at_level(logging.DEBUG, logger='sceneblocks.assembler'):
        workspace_to_code(Workspace([sky]))

    assert '-> workspace_to_code(Workspace(1 top-level, 0 variable(s)))' in caplog.text
