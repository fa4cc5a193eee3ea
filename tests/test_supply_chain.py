"""Tests for the supply chain route."""

import pytest

PATH = "/api/supply-chain"


@pytest.fixture
def supplier(api):
    return api.create(PATH, "create-supplier", {"name": "Parts Co", "email": "sales@parts.test", "leadTime": 7})


@pytest.fixture
def order(api, supplier):
    return api.create(
        PATH,
        "create-order",
        {
            "supplierId": supplier["id"],
            "items": [{"productId": "p1", "quantity": 2, "unitPrice": 50}, {"productId": "p2", "quantity": 1, "unitPrice": 25}],
            "expectedDelivery": "2024-07-01",
        },
    )


def test_order_is_priced_and_numbered(order, supplier):
    assert supplier["rating"] == 5
    assert order["totalAmount"] == 125
    assert order["orderNumber"].startswith("PO-")
    assert order["status"] == "draft"


def test_confirm_order(api, order):
    """Test confirming an order and the guards around it."""
    confirmed = api.ok(PATH, "confirm-order", {"orderId": order["id"]})
    assert confirmed["status"] == "confirmed"
    assert api.post(PATH, "confirm-order", {"orderId": order["id"]}).status_code == 400

    api.ok(PATH, "update-order-status", {"orderId": order["id"], "status": "delivered"})
    response = api.post(PATH, "update-order-status", {"orderId": order["id"], "status": "cancelled"})
    assert response.json()["error"]["code"] == "INVALID_STATE"


def test_shipment_delivery(api, order):
    shipment = api.create(
        PATH, "create-shipment", {"purchaseOrderId": order["id"], "carrier": "DHL", "estimatedDelivery": "2024-07-01"}
    )
    assert shipment["status"] == "pending"
    assert shipment["trackingNumber"].startswith("SHP-")

    api.ok(PATH, "update-shipment-status", {"shipmentId": shipment["id"], "status": "in-transit"})
    assert api.fetch(PATH, "metrics")["inTransitShipments"] == 1
    delivered = api.ok(PATH, "update-shipment-status", {"shipmentId": shipment["id"], "status": "delivered"})
    assert delivered["actualDelivery"] is not None


def test_metrics(api, supplier, order):
    api.create(PATH, "create-supplier", {"name": "Slow Co", "email": "a@slow.test", "leadTime": 21})
    second = api.create(
        PATH,
        "create-order",
        {"supplierId": supplier["id"], "items": [{"productId": "p", "quantity": 1, "unitPrice": 400}], "expectedDelivery": "2024-07-01"},
    )
    api.ok(PATH, "confirm-order", {"orderId": second["id"]})

    metrics = api.fetch(PATH, "metrics")
    assert metrics == {
        "totalSuppliers": 2,
        "activeSuppliers": 2,
        "totalOrders": 2,
        "pendingOrders": 1,
        "totalSpend": 400,
        "totalShipments": 0,
        "inTransitShipments": 0,
        "averageLeadTime": 14,
    }
    assert len(api.fetch(PATH, "orders", status="draft")) == 1


def test_validation(api, supplier):
    assert api.post(PATH, "create-supplier", {"name": "X", "email": "not-an-email"}).status_code == 400
    response = api.post(PATH, "create-order", {"supplierId": supplier["id"], "items": [], "expectedDelivery": "2024-07-01"})
    assert response.status_code == 400
    response = api.post(
        PATH, "create-order", {"supplierId": "x", "items": [{"productId": "p", "quantity": 1, "unitPrice": 1}], "expectedDelivery": "2024-07-01"}
    )
    assert response.status_code == 404
