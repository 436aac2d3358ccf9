from src.service.conference.app.interface.i_order_projection_repo import IOrderProjectionRepo

__all__ = ['IOrderProjectionRepo']
