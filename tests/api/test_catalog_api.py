"""
Tests for the product endpoints.
"""
from rest_framework import status


class TestItemList:
    url = '/api/v1/products/'

    def test_sorted_by_price(self, api_client):
        response = api_client.get(self.url)

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data] == ['P104', 'P102', 'P103', 'P101']

    def test_item_fields(self, api_client):
        laptop = api_client.get(self.url).data[-1]

        assert laptop['name'] == 'Laptop'
        assert laptop['unit_price'] == '1200.00'
        assert laptop['category'] == 'Electronics'
        assert laptop['tax_rate'] == '18.00'

    def test_csv_catalog(self, api_client, settings, tmp_path):
        csv_path = tmp_path / 'products.csv'
        csv_path.write_text('id,name,price,category\nZ1,Pen,1.50,Stationery\n', encoding='utf-8')
        settings.CHECKOUT = {**settings.CHECKOUT, 'CATALOG_CSV': str(csv_path)}

        response = api_client.get(self.url)

        assert [item['id'] for item in response.data] == ['Z1']
        assert response.data[0]['tax_rate'] == '5.00'


class TestItemDetail:
    def test_known_item(self, api_client):
        response = api_client.get('/api/v1/products/P102/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Java Book'
        assert response.data['tax_rate'] == '5.00'

    def test_unknown_item(self, api_client):
        response = api_client.get('/api/v1/products/P999/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'ITEM_NOT_FOUND'
        assert response.data['entity_id'] == 'P999'


def test_schema(api_client):
    response = api_client.get('/api/schema/', {'format': 'json'})

    assert response.status_code == status.HTTP_200_OK
    assert '/api/v1/orders/checkout/' in response.data['paths']
