"""存储过程名称"""

# 客户
CLIENTES_LISTAR = "SP_Clientes_Listar"
CLIENTE_BUSCAR = "SP_Cliente_Buscar"
CLIENTE_INSERTAR = "SP_Cliente_Insertar"
CLIENTE_ACTUALIZAR = "SP_Cliente_Actualizar"

# 产品
PRODUCTOS_LISTAR = "SP_Productos_Listar"
PRODUCTO_BUSCAR = "SP_Productos_Buscar"
PRODUCTO_INSERTAR = "SP_Producto_Insertar"
PRODUCTO_ACTUALIZAR = "SP_Producto_Actualizar"

# 订单
ORDENES_CREAR = "SP_Ordenes_Crear"
