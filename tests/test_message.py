# -*- coding: utf-8 -*-
#
import logging

import pytest

from sinedft.message import Message, info


def test_indentation(caplog):
    with caplog.at_level(logging.INFO, logger='sinedft'):
        with Message('outer'):
            with Message('inner'):
                info('work')
            info('more work')
        info('done')
    assert [r.getMessage() for r in caplog.records] \
        == ['outer', '  inner', '    work', '  more work', 'done']
    return


def test_failure(caplog):
    with caplog.at_level(logging.INFO, logger='sinedft'):
        with pytest.raises(RuntimeError):
            with Message('solve'):
                raise RuntimeError('diverged')
        info('after')
    assert caplog.records[-2].levelname == 'ERROR'
    assert 'diverged' in caplog.records[-2].getMessage()
    # indentation is restored
    assert caplog.records[-1].getMessage() == 'after'
    return
