from .product import ProductCreateForm, ProductUpdateForm

__all__ = ['ProductCreateForm', 'ProductUpdateForm']
