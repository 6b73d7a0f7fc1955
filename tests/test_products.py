"""상품 API 테스트.

Product API tests — Registration with size generation, duplicate names,
search, detail, update, deletion cascade and image management.
"""

from httpx import AsyncClient
from sqlalchemy import func, select

from shoestrade.models.product import Product, ProductImage, ProductSize
from shoestrade.repositories.product_repository import product_repository
from tests.conftest import assert_failure, assert_success, auth_header, create_product

URL = "/product"


def product_payload(brand_id: int, **overrides) -> dict:
    payload = {
        "kor_name": "조던 1 레트로 하이 시카고",
        "eng_name": "Jordan 1 Retro High Chicago",
        "code": "555088-101",
        "color": "WHITE/BLACK-VARSITY RED",
        "release_price": 199000,
        "brand_id": brand_id,
        "image_list": ["chicago-1.png", "chicago-2.png"],
    }
    payload.update(overrides)
    return payload


async def count_rows(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar()


class TestProductCreate:
    """상품 등록 테스트."""

    async def test_create_product(self, client: AsyncClient, brand, admin_token, db):
        """상품 등록 시 17개 사이즈(220~300, 5 단위)와 이미지가 생성됨."""
        res = await client.post(URL, json=product_payload(brand.id), headers=auth_header(admin_token))
        body = assert_success(res)
        data = body["data"]
        assert data["kor_name"] == "조던 1 레트로 하이 시카고"
        assert data["brand_name"] == "Nike"
        assert data["image"] == "chicago-1.png"

        sizes = (
            await db.execute(
                select(ProductSize.size).where(ProductSize.product_id == data["id"]).order_by(ProductSize.size)
            )
        ).scalars().all()
        assert list(sizes) == list(range(220, 301, 5))
        assert len(sizes) == 17
        assert await count_rows(db, ProductImage) == 2

    async def test_create_duplicate_kor_name(self, client: AsyncClient, brand, product, admin_token, db):
        """한글명 중복 시 -1, 행이 추가되지 않음."""
        res = await client.post(
            URL,
            json=product_payload(brand.id, kor_name=product.kor_name),
            headers=auth_header(admin_token),
        )
        body = assert_failure(res, -1)
        assert body["message"] == f"{product.kor_name} : 이미 존재하는 상품 이름입니다."

        assert await count_rows(db, Product) == 1
        assert await count_rows(db, ProductSize) == 17

    async def test_create_duplicate_eng_name(self, client: AsyncClient, brand, product, admin_token, db):
        """영문명 중복 시 -1, 행이 추가되지 않음."""
        res = await client.post(
            URL,
            json=product_payload(brand.id, eng_name=product.eng_name),
            headers=auth_header(admin_token),
        )
        assert_failure(res, -1)
        assert await count_rows(db, Product) == 1
        assert await count_rows(db, ProductImage) == 1

    async def test_create_unique_constraint_race(self, client: AsyncClient, brand, product, admin_token, monkeypatch):
        """중복 검사를 통과한 동시 등록도 UNIQUE 제약 위반 시 -1로 응답."""
        async def no_product(db, name):
            return None

        monkeypatch.setattr(product_repository, "get_by_kor_name", no_product)
        monkeypatch.setattr(product_repository, "get_by_eng_name", no_product)

        res = await client.post(
            URL,
            json=product_payload(brand.id, kor_name=product.kor_name),
            headers=auth_header(admin_token),
        )
        body = assert_failure(res, -1)
        assert body["message"] == f"{product.kor_name} : 이미 존재하는 상품 이름입니다."

    async def test_create_with_unknown_brand(self, client: AsyncClient, admin_token, db):
        res = await client.post(URL, json=product_payload(9999), headers=auth_header(admin_token))
        body = assert_failure(res, -1)
        assert body["message"] == "9999 : 해당 id의 브랜드를 찾을 수 없습니다."
        assert await count_rows(db, Product) == 0

    async def test_create_product_member_forbidden(self, client: AsyncClient, brand, member_token):
        res = await client.post(URL, json=product_payload(brand.id), headers=auth_header(member_token))
        assert_failure(res, 1003)

    async def test_create_with_overlong_code(self, client: AsyncClient, brand, admin_token, db):
        """모델 번호는 100자 이하 — 초과 시 -9999."""
        res = await client.post(URL, json=product_payload(brand.id, code="C" * 101), headers=auth_header(admin_token))
        assert_failure(res, -9999)
        assert await count_rows(db, Product) == 0

    async def test_create_with_overlong_image_name(self, client: AsyncClient, brand, admin_token, db):
        """이미지 이름은 255자 이하 — 초과 시 -9999."""
        res = await client.post(
            URL,
            json=product_payload(brand.id, image_list=["a" * 252 + ".png"]),
            headers=auth_header(admin_token),
        )
        assert_failure(res, -9999)
        assert await count_rows(db, Product) == 0


class TestProductSearch:
    """상품 검색 테스트."""

    async def test_search_by_name(self, client: AsyncClient, brand, product, db):
        await create_product(db, brand, "나이키 에어포스 1", "Nike Air Force 1")

        res = await client.get(URL, params={"name": "dunk"})
        body = assert_success(res)
        assert body["total"] == 1
        assert body["data"][0]["id"] == product.id

        res = await client.get(URL, params={"name": "나이키"})
        assert assert_success(res)["total"] == 2

    async def test_search_wildcards_match_literally(self, client: AsyncClient, brand, product, db):
        """검색어의 % 와 _ 는 와일드카드가 아닌 문자 그대로 비교됨."""
        await create_product(db, brand, "나이키 100% 코튼 삭스", "Nike 100% Cotton Socks")

        res = await client.get(URL, params={"name": "%"})
        assert [p["eng_name"] for p in assert_success(res)["data"]] == ["Nike 100% Cotton Socks"]

        res = await client.get(URL, params={"name": "_"})
        assert assert_success(res)["total"] == 0

    async def test_search_in_brands(self, client: AsyncClient, brand, product, db):
        from shoestrade.models.product import Brand

        adidas = Brand(name="Adidas")
        db.add(adidas)
        await db.flush()
        await create_product(db, adidas, "아디다스 삼바 OG", "Adidas Samba OG")

        res = await client.get(URL, params={"brand_id": [adidas.id]})
        body = assert_success(res)
        assert [p["brand_name"] for p in body["data"]] == ["Adidas"]

        res = await client.get(URL, params={"brand_id": [brand.id, adidas.id]})
        assert assert_success(res)["total"] == 2

    async def test_search_pagination(self, client: AsyncClient, brand, db):
        for i in range(5):
            await create_product(db, brand, f"상품 {i}", f"Product {i}")

        res = await client.get(URL, params={"page": 2, "per_page": 2})
        body = assert_success(res)
        assert body["total"] == 5
        assert body["pages"] == 3
        assert body["page"] == 2
        assert [p["eng_name"] for p in body["data"]] == ["Product 2", "Product 3"]


class TestProductDetail:
    """상품 상세 조회 테스트."""

    async def test_get_detail(self, client: AsyncClient, product):
        res = await client.get(f"{URL}/{product.id}")
        data = assert_success(res)["data"]
        assert data["eng_name"] == "Nike Dunk Low Panda"
        assert [i["name"] for i in data["images"]] == ["panda-1.png"]
        assert [s["size"] for s in data["sizes"]] == list(range(220, 301, 5))
        assert data["lowest_sell_price"] is None
        assert data["highest_buy_price"] is None
        assert data["last_done_price"] is None

    async def test_get_nonexistent_product(self, client: AsyncClient):
        res = await client.get(f"{URL}/9999")
        body = assert_failure(res, -1)
        assert body["message"] == "9999 : 해당 id의 상품을 찾을 수 없습니다."


class TestProductUpdate:
    """상품 수정 테스트."""

    async def test_update_with_unchanged_names(self, client: AsyncClient, brand, product, admin_token):
        """이름을 바꾸지 않고 수정하면 중복 오류가 발생하지 않음."""
        res = await client.post(
            f"{URL}/{product.id}",
            json=product_payload(
                brand.id,
                kor_name=product.kor_name,
                eng_name=product.eng_name,
                color="BLACK",
                release_price=129000,
            ),
            headers=auth_header(admin_token),
        )
        assert_success(res)

        data = assert_success(await client.get(f"{URL}/{product.id}"))["data"]
        assert data["color"] == "BLACK"
        assert data["release_price"] == 129000

    async def test_update_to_taken_name(self, client: AsyncClient, brand, product, admin_token, db):
        other = await create_product(db, brand, "나이키 에어포스 1", "Nike Air Force 1")
        res = await client.post(
            f"{URL}/{other.id}",
            json=product_payload(brand.id, kor_name=product.kor_name, eng_name="Nike Air Force 1"),
            headers=auth_header(admin_token),
        )
        assert_failure(res, -1)

    async def test_update_changes_brand(self, client: AsyncClient, product, admin_token, db):
        from shoestrade.models.product import Brand

        adidas = Brand(name="Adidas")
        db.add(adidas)
        await db.flush()

        res = await client.post(
            f"{URL}/{product.id}",
            json=product_payload(adidas.id, kor_name=product.kor_name, eng_name=product.eng_name),
            headers=auth_header(admin_token),
        )
        assert_success(res)
        data = assert_success(await client.get(f"{URL}/{product.id}"))["data"]
        assert data["brand_id"] == adidas.id
        assert data["brand_name"] == "Adidas"

    async def test_update_nonexistent_product(self, client: AsyncClient, brand, admin_token):
        res = await client.post(f"{URL}/9999", json=product_payload(brand.id), headers=auth_header(admin_token))
        assert_failure(res, -1)


class TestProductDelete:
    """상품 삭제 테스트."""

    async def test_delete_product_removes_sizes_and_images(self, client: AsyncClient, product, admin_token, db):
        res = await client.delete(f"{URL}/{product.id}", headers=auth_header(admin_token))
        assert_success(res)

        assert await count_rows(db, Product) == 0
        assert await count_rows(db, ProductSize) == 0
        assert await count_rows(db, ProductImage) == 0

    async def test_delete_nonexistent_product(self, client: AsyncClient, admin_token):
        res = await client.delete(f"{URL}/9999", headers=auth_header(admin_token))
        body = assert_failure(res, -1)
        assert body["message"] == "9999 : 해당 id의 상품을 찾을 수 없습니다."


class TestProductImage:
    """상품 이미지 테스트."""

    async def test_add_images(self, client: AsyncClient, product, admin_token):
        """새 이미지 이름은 등록 후 조회 가능."""
        res = await client.post(
            f"{URL}/image",
            json={"product_id": product.id, "image_name_list": ["panda-2.png", "panda-3.png"]},
            headers=auth_header(admin_token),
        )
        assert_success(res)

        res = await client.get(f"{URL}/{product.id}/image")
        names = [i["name"] for i in assert_success(res)["data"]]
        assert names == ["panda-1.png", "panda-2.png", "panda-3.png"]

    async def test_add_colliding_images(self, client: AsyncClient, product, admin_token, db):
        """기존 이름과 겹치면 겹친 이름 전체를 나열하고 아무것도 추가하지 않음."""
        await client.post(
            f"{URL}/image",
            json={"product_id": product.id, "image_name_list": ["panda-2.png"]},
            headers=auth_header(admin_token),
        )

        res = await client.post(
            f"{URL}/image",
            json={"product_id": product.id, "image_name_list": ["panda-1.png", "panda-2.png", "panda-9.png"]},
            headers=auth_header(admin_token),
        )
        body = assert_failure(res, -1)
        assert body["message"] == "이미지 이름 (panda-1.png panda-2.png) 이 중복됩니다."
        assert await count_rows(db, ProductImage) == 2

    async def test_add_overlong_image_name(self, client: AsyncClient, product, admin_token, db):
        res = await client.post(
            f"{URL}/image",
            json={"product_id": product.id, "image_name_list": ["b" * 256]},
            headers=auth_header(admin_token),
        )
        assert_failure(res, -9999)
        assert await count_rows(db, ProductImage) == 1

    async def test_add_images_to_unknown_product(self, client: AsyncClient, admin_token):
        res = await client.post(
            f"{URL}/image",
            json={"product_id": 9999, "image_name_list": ["x.png"]},
            headers=auth_header(admin_token),
        )
        assert_failure(res, -1)

    async def test_delete_image(self, client: AsyncClient, product, admin_token):
        images = assert_success(await client.get(f"{URL}/{product.id}/image"))["data"]

        res = await client.delete(f"{URL}/image/{images[0]['id']}", headers=auth_header(admin_token))
        assert_success(res)

        assert assert_success(await client.get(f"{URL}/{product.id}/image"))["data"] == []

    async def test_delete_nonexistent_image(self, client: AsyncClient, admin_token):
        res = await client.delete(f"{URL}/image/9999", headers=auth_header(admin_token))
        body = assert_failure(res, -1)
        assert body["message"] == "9999 : 해당 id의 이미지를 찾을 수 없습니다."
