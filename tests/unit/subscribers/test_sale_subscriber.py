"""Unit tests for vendsim.subscribers.sale."""

import logging

from vendsim.events import LowStockWarningEvent, MachineSaleEvent
from vendsim.subscribers.sale import MachineSaleSubscriber


def make(machines, report_lines, **kwargs):
    return MachineSaleSubscriber(machines, report=report_lines.append, **kwargs)


def test_kind():
    assert MachineSaleSubscriber.kind == "machine.sale"


def test_decrements_target_machine(machines, report_lines, mock_dispatcher):
    subscriber = make(machines, report_lines)

    subscriber.handle(mock_dispatcher, MachineSaleEvent("002", quantity=2))

    assert [m.stock_level for m in machines] == [10, 8, 10]
    assert report_lines[0] == "Sale machine 002 with 2"
    assert "Machine 002 remainer stock 10 - 2 = 8" in report_lines
    mock_dispatcher.publish.assert_not_called()


def test_unknown_machine_is_ignored(machines, report_lines, mock_dispatcher, caplog):
    subscriber = make(machines, report_lines)

    with caplog.at_level(logging.WARNING):
        subscriber.handle(mock_dispatcher, MachineSaleEvent("999"))

    assert report_lines == []
    assert [m.stock_level for m in machines] == [10, 10, 10]
    assert "Ignoring sale for unknown machine 999" in caplog.text


def test_refuses_sale_larger_than_stock(machines, report_lines, mock_dispatcher, caplog):
    machines[0].stock_level = 1
    subscriber = make(machines, report_lines)

    with caplog.at_level(logging.WARNING):
        subscriber.handle(mock_dispatcher, MachineSaleEvent("001", quantity=2))

    assert machines[0].stock_level == 1
    assert report_lines == []
    assert "Machine 001 holds 1, refusing sale of 2" in caplog.text


def test_sale_of_all_remaining_stock(machines, report_lines, mock_dispatcher):
    machines[0].stock_level = 2
    subscriber = make(machines, report_lines, low_stock_threshold=0)

    subscriber.handle(mock_dispatcher, MachineSaleEvent("001", quantity=2))

    assert machines[0].stock_level == 0
    mock_dispatcher.publish.assert_not_called()


def test_publishes_warning_when_crossing_threshold(machines, report_lines, mock_dispatcher):
    machines[0].stock_level = 4
    subscriber = make(machines, report_lines, low_stock_threshold=3)

    subscriber.handle(mock_dispatcher, MachineSaleEvent("001", t=7, quantity=2))

    mock_dispatcher.publish.assert_called_once_with(
        LowStockWarningEvent("001", t=7, stock_level=2)
    )


def test_no_warning_at_threshold(machines, report_lines, mock_dispatcher):
    machines[0].stock_level = 5
    subscriber = make(machines, report_lines, low_stock_threshold=3)

    subscriber.handle(mock_dispatcher, MachineSaleEvent("001", quantity=2))

    assert machines[0].stock_level == 3
    mock_dispatcher.publish.assert_not_called()


def test_warns_again_when_sale_leaves_machine_low(machines, report_lines, mock_dispatcher):
    machines[0].stock_level = 2
    subscriber = make(machines, report_lines, low_stock_threshold=3)

    subscriber.handle(mock_dispatcher, MachineSaleEvent("001", t=4, quantity=1))

    assert machines[0].stock_level == 1
    mock_dispatcher.publish.assert_called_once_with(
        LowStockWarningEvent("001", t=4, stock_level=1)
    )


def test_refused_sale_on_low_machine_does_not_warn(machines, report_lines, mock_dispatcher):
    machines[0].stock_level = 1
    subscriber = make(machines, report_lines, low_stock_threshold=3)

    subscriber.handle(mock_dispatcher, MachineSaleEvent("001", quantity=2))

    mock_dispatcher.publish.assert_not_called()


def test_default_report_logs_info(machines, mock_dispatcher, caplog):
    subscriber = MachineSaleSubscriber(machines)

    with caplog.at_level(logging.INFO, logger="vendsim.subscribers.base"):
        subscriber.handle(mock_dispatcher, MachineSaleEvent("003", quantity=1))

    assert "Sale machine 003 with 1" in caplog.messages
