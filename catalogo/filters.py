import django_filters as filters

from .models import Produto, ProdutoVariacao


class ProdutoFilter(filters.FilterSet):
    nome = filters.CharFilter(field_name="nome", lookup_expr="icontains")
    status = filters.ChoiceFilter(choices=Produto.STATUS_CHOICES)

    # Relacionamentos
    categoria_id = filters.NumberFilter(field_name="categoria_id")
    marca_id = filters.NumberFilter(field_name="marca_id")
    fornecedor_id = filters.NumberFilter(field_name="fornecedor_id")

    # Flags de exibição
    destaque = filters.BooleanFilter(field_name="destaque")
    novidade = filters.BooleanFilter(field_name="novidade")
    produto_em_oferta = filters.BooleanFilter(field_name="produto_em_oferta")

    # Faixa de preço de venda
    preco_min = filters.NumberFilter(field_name="preco_venda", lookup_expr="gte")
    preco_max = filters.NumberFilter(field_name="preco_venda", lookup_expr="lte")

    class Meta:
        model = Produto
        fields = [
            "nome",
            "status",
            "categoria_id",
            "marca_id",
            "fornecedor_id",
            "destaque",
            "novidade",
            "produto_em_oferta",
            "preco_min",
            "preco_max",
        ]


class ProdutoVariacaoFilter(filters.FilterSet):
    produto_id = filters.NumberFilter(field_name="produto_id")
    tipo_variacao = filters.CharFilter(field_name="tipo_variacao", lookup_expr="iexact")

    class Meta:
        model = ProdutoVariacao
        fields = ["produto_id", "tipo_variacao"]
