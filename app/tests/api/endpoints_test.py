"""
通过 TestClient 测试全部接口：统一返回200，响应体为 success/message/errors/data
"""
from app.db import scripts
from app.infrastructure.exceptions import DatabaseConnectionError
from app.tests.fakes import cliente_row, detalle_row, orden_row, producto_row, status_row

ENVELOPE_KEYS = {"success", "message", "errors", "data"}


def test_root_health(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["status"] == "online"


class TestClienteEndpoints:

    def test_listar(self, client, executor):
        executor.respond(scripts.CLIENTES_LISTAR, [cliente_row(1), cliente_row(2, "Ana", "0801-1985-00001")])

        response = client.get("/Cliente/Listar")

        assert response.status_code == 200
        body = response.json()
        assert set(body) == ENVELOPE_KEYS
        assert body["success"] is True
        assert body["errors"] == []
        assert body["data"][1] == {"clienteId": 2, "nombre": "Ana", "identidad": "0801-1985-00001"}

    def test_listar_database_down(self, client, executor):
        executor.error = DatabaseConnectionError("Can't connect")

        body = client.get("/Cliente/Listar").json()

        assert body["success"] is True
        assert body["data"] == []

    def test_buscar_not_found(self, client, executor):
        executor.respond(scripts.CLIENTE_BUSCAR, [status_row(404, "No existe")])

        response = client.get("/Cliente/Buscar/999999")

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "message": "Cliente no encontrado",
            "errors": ["No existe un cliente con el ID especificado"],
            "data": None,
        }

    def test_buscar_found(self, client, executor):
        executor.respond(scripts.CLIENTE_BUSCAR, [cliente_row(4)])

        body = client.get("/Cliente/Buscar/4").json()

        assert body["success"] is True
        assert body["data"]["clienteId"] == 4
        assert executor.calls == [(scripts.CLIENTE_BUSCAR, [4])]

    def test_insertar(self, client, executor):
        executor.respond(scripts.CLIENTE_INSERTAR, [cliente_row(21, "Juan Pérez", "0801-1990-12345")])

        body = client.post(
            "/Cliente/Insertar",
            json={"clienteId": 0, "nombre": "Juan Pérez", "identidad": "0801-1990-12345"},
        ).json()

        assert body["success"] is True
        assert body["message"] == "Cliente creado exitosamente"
        assert body["data"] == {"clienteId": 21, "nombre": "Juan Pérez", "identidad": "0801-1990-12345"}

    def test_insertar_non_zero_id(self, client, executor):
        response = client.post(
            "/Cliente/Insertar",
            json={"clienteId": 8, "nombre": "Juan Pérez", "identidad": "0801-1990-12345"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["errors"] == ["El clienteId debe ser 0 para un nuevo cliente."]
        assert body["data"] is None
        assert executor.calls == []

    def test_actualizar_uses_path_id(self, client, executor):
        executor.respond(scripts.CLIENTE_ACTUALIZAR, [cliente_row(6, "Ana", "0801-1985-00001")])

        body = client.put(
            "/Cliente/Actualizar/6",
            json={"clienteId": 99, "nombre": "Ana", "identidad": "0801-1985-00001"},
        ).json()

        assert body["success"] is True
        assert executor.calls == [(scripts.CLIENTE_ACTUALIZAR, [6, "Ana", "0801-1985-00001"])]

    def test_malformed_body_is_enveloped(self, client, executor):
        response = client.post("/Cliente/Insertar", json={"clienteId": 0})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["data"] is None
        assert body["errors"]
        assert executor.calls == []


class TestProductoEndpoints:

    def test_listar_prices_are_numbers(self, client, executor):
        executor.respond(scripts.PRODUCTOS_LISTAR, [producto_row(1, precio="15000.50")])

        body = client.get("/Producto/Listar").json()

        assert body["data"] == [{
            "productoId": 1,
            "nombre": "Laptop",
            "descripcion": "Laptop 14 pulgadas",
            "precio": 15000.5,
            "existencia": 10,
        }]

    def test_buscar_not_found(self, client):
        body = client.get("/Producto/Buscar/999999").json()

        assert body["success"] is False
        assert body["message"] == "Producto no encontrado"

    def test_insertar(self, client, executor):
        executor.respond(scripts.PRODUCTO_INSERTAR, [producto_row(3, "Mouse", "Inalámbrico", "250.00", 5)])

        body = client.post(
            "/Producto/Insertar",
            json={"productoId": 0, "nombre": "Mouse", "descripcion": "Inalámbrico", "precio": 250.00, "existencia": 5},
        ).json()

        assert body["success"] is True
        assert body["data"]["productoId"] == 3
        assert body["data"]["precio"] == 250.0

    def test_actualizar_error(self, client, executor):
        executor.respond(scripts.PRODUCTO_ACTUALIZAR, [status_row(1, "El producto no existe.")])

        body = client.put(
            "/Producto/Actualizar/77",
            json={"productoId": 0, "nombre": "Mouse", "descripcion": "Inalámbrico", "precio": 250.00, "existencia": 5},
        ).json()

        assert body == {
            "success": False,
            "message": "Error al actualizar el producto",
            "errors": ["El producto no existe."],
            "data": None,
        }
        assert executor.calls[0][1][0] == 77


class TestOrdenEndpoints:

    def test_insertar(self, client, executor):
        executor.respond(
            scripts.ORDENES_CREAR,
            [orden_row(100, cliente_id=1)],
            [detalle_row(1, producto_id=5, cantidad=3), detalle_row(2, producto_id=4)],
        )

        body = client.post(
            "/Orden/Insertar",
            json={"ordenId": 0, "clienteId": 1, "detalle": [
                {"productoId": 5, "cantidad": 3},
                {"productoId": 4, "cantidad": 1},
            ]},
        ).json()

        assert body["success"] is True
        assert body["message"] == "Orden creada exitosamente"
        data = body["data"]
        assert data["ordenId"] == 100
        assert data["clienteNombre"] == "Juan Pérez"
        assert data["total"] == 345.0
        assert data["fechaCreacion"].startswith("2024-05-01T10:30:00")
        assert [d["productoId"] for d in data["detalles"]] == [5, 4]
        assert data["detalles"][0] == {
            "detalleOrdenId": 1,
            "ordenId": 100,
            "productoId": 5,
            "productoNombre": "Producto 5",
            "cantidad": 3,
            "subtotal": 300.0,
            "impuesto": 45.0,
            "total": 345.0,
        }

    def test_insertar_without_lines(self, client, executor):
        response = client.post("/Orden/Insertar", json={"ordenId": 0, "clienteId": 1, "detalle": []})

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "message": "Error al crear la orden",
            "errors": ["Debe tener al menos un detalle."],
            "data": None,
        }
        assert executor.calls == []

    def test_insertar_unknown_client(self, client, executor):
        executor.respond(scripts.ORDENES_CREAR, [status_row(404, "El cliente no existe.")], [])

        body = client.post(
            "/Orden/Insertar",
            json={"ordenId": 0, "clienteId": 999, "detalle": [{"productoId": 1, "cantidad": 1}]},
        ).json()

        assert body["success"] is False
        assert body["message"] == "Error al crear la orden"
        assert body["errors"] == ["El cliente no existe."]
        assert body["data"] is None


def test_unknown_route_is_enveloped(client):
    response = client.get("/NoExiste")

    assert response.status_code == 200
    assert response.json()["success"] is False
