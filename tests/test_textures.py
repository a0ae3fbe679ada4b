"""Unit tests for texture name guessing and item details."""

from pathlib import Path

from craftalog.textures import ItemDetails, TextureKind, TextureService, candidate_names

from conftest import PNG_BYTES


def make_service(pack_dir: Path, public: Path, copy_files: bool = True) -> TextureService:
    textures = pack_dir / "resource_pack" / "textures"
    return TextureService(textures / "blocks", textures / "items", public, copy_files=copy_files)


class TestCandidateNames:
    """Test file-name heuristics."""

    def test_plain_id_first(self) -> None:
        """Test the id itself is always tried first."""
        assert candidate_names("stick")[0] == "stick"

    def test_two_segment_reversal(self) -> None:
        """Test a_b also tries b_a."""
        names = candidate_names("acacia_planks")
        assert names[:2] == ["acacia_planks", "planks_acacia"]

    def test_wood_variants_for_generic_ids(self) -> None:
        """Test ids without a wood prefix try every wood type both ways."""
        names = candidate_names("boat")
        assert "oak_boat" in names
        assert "boat_pale_oak" in names
        assert "stripped_boat" not in names

    def test_no_wood_variants_for_wood_or_stripped(self) -> None:
        """Test wood-prefixed and stripped ids skip the wood expansion."""
        assert not any(n.startswith("birch_oak") for n in candidate_names("oak_log"))
        assert "oak_stripped_oak_log" not in candidate_names("stripped_oak_log")

    def test_derivative_suffix_falls_back_to_base(self) -> None:
        """Test stairs/slabs try their base block."""
        names = candidate_names("stone_stairs")
        assert "stone" in names
        names = candidate_names("brick_slab")
        assert "brick" in names

    def test_door_variants(self) -> None:
        """Test doors try upper/lower halves."""
        names = candidate_names("iron_door")
        assert "iron_door_upper" in names
        assert "iron_door_top" in names
        assert "door_iron_upper" in names
        assert "door_iron_lower" in names


class TestTextureService:
    """Test texture lookup, copying and item details."""

    def test_item_texture_copied(self, pack_dir: Path, tmp_path: Path) -> None:
        """Test an item texture is copied under the item id."""
        public = tmp_path / "public"
        service = make_service(pack_dir, public)

        path = service.find_texture("coal", TextureKind.ITEM)

        assert path == "/textures/items/coal.png"
        assert (public / "textures" / "items" / "coal.png").read_bytes() == PNG_BYTES

    def test_reversed_name_copied_under_item_id(self, pack_dir: Path, tmp_path: Path) -> None:
        """Test planks_oak.png is found for oak_planks and stored as oak_planks.png."""
        public = tmp_path / "public"
        service = make_service(pack_dir, public)

        assert service.find_texture("oak_planks", TextureKind.BLOCK) == "/textures/blocks/oak_planks.png"
        assert (public / "textures" / "blocks" / "oak_planks.png").exists()

    def test_missing_texture(self, pack_dir: Path, tmp_path: Path) -> None:
        """Test unknown ids return None."""
        service = make_service(pack_dir, tmp_path / "public")
        assert service.find_texture("white_banner", TextureKind.ITEM) is None

    def test_block_with_top_and_side(self, pack_dir: Path, tmp_path: Path) -> None:
        """Test *_block ids fall back to the base name and use top + side."""
        service = make_service(pack_dir, tmp_path / "public")
        details = service.item_details("melon_block")

        assert details.name == "Melon Block"
        assert details.icon == ("/textures/blocks/melon_top.png", "/textures/blocks/melon_side.png")
        assert details.is_block

    def test_item_falls_back_to_block_texture(self, pack_dir: Path, tmp_path: Path) -> None:
        """Test items without an item texture use a block texture."""
        service = make_service(pack_dir, tmp_path / "public")
        details = service.item_details("crimson_planks")
        assert details.icon == ("/textures/blocks/crimson_planks.png",)
        assert not details.is_block

    def test_placeholder_icon(self, pack_dir: Path, tmp_path: Path) -> None:
        """Test items without any texture get the stick icon."""
        service = make_service(pack_dir, tmp_path / "public")
        details = service.item_details("torch")
        assert details.icon == ("/textures/items/stick.png",)

    def test_dry_run_does_not_copy(self, pack_dir: Path, tmp_path: Path) -> None:
        """Test copy_files=False only checks existence."""
        public = tmp_path / "public"
        service = make_service(pack_dir, public, copy_files=False)

        assert service.find_texture("coal", TextureKind.ITEM) == "/textures/items/coal.png"
        assert not public.exists()

    def test_build_item_details_keeps_order(self, pack_dir: Path, tmp_path: Path) -> None:
        """Test details are built in registry order."""
        service = make_service(pack_dir, tmp_path / "public")
        details = service.build_item_details(["torch", "coal", "arrow"])
        assert list(details) == ["torch", "coal", "arrow"]
        assert details["coal"] == ItemDetails("coal", "Coal", ("/textures/items/coal.png",))


class TestItemDetailsModel:
    """Test ItemDetails JSON form."""

    def test_from_json_accepts_single_string_icon(self) -> None:
        """Test a bare icon string becomes a one-element tuple."""
        details = ItemDetails.from_json({"id": "coal", "name": "Coal", "icon": "/c.png"})
        assert details.icon == ("/c.png",)

    def test_to_json(self) -> None:
        """Test the emitted shape."""
        details = ItemDetails("melon", "Melon Slice", ("/m.png",))
        assert details.to_json() == {"id": "melon", "name": "Melon Slice", "icon": ["/m.png"]}
