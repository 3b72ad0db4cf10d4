"""
Merkle Whitelist - Merkle Tree Implementation

Provides deterministic Merkle tree construction over an ordered address
list, inclusion proof extraction by target hash, and proof verification.

Nodes live in a flat arena and reference each other by index. Parent hashes
are Keccak-256 over the children's hex strings (see ``hasher``).

For odd numbers of nodes on a level, the last node is carried forward
unchanged (not duplicated, not self-paired) and meets its partner on a
higher level.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from merkle_whitelist.crypto.hasher import leaf_hash, normalize_digest, pair_hash


class MerkleTreeError(Exception):
    """Base exception for Merkle tree errors."""

    pass


class EmptyTreeError(MerkleTreeError, ValueError):
    """Tree construction was attempted without any leaves."""

    pass


class ProofDirection(str, Enum):
    """Direction indicator for proof path elements."""

    LEFT = "L"
    RIGHT = "R"


class ProofStatus(str, Enum):
    """Outcome of a proof search."""

    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class MerkleNode:
    """
    Represents a node in the Merkle tree arena.

    Attributes:
        hash: Keccak-256 hash of the node
        left: Arena index of the left child (None for leaves)
        right: Arena index of the right child (None for leaves)
        data: Original data (only for leaf nodes)
        position: Position in the original leaf array
    """

    hash: str
    left: int | None = None
    right: int | None = None
    data: bytes | None = None
    position: int | None = None

    @property
    def is_leaf(self) -> bool:
        """Check if this node is a leaf."""
        return self.left is None and self.right is None


@dataclass
class ProofElement:
    """
    Single element in a Merkle proof path.

    Attributes:
        hash: The sibling hash at this level
        direction: Whether sibling is LEFT or RIGHT of the path
    """

    hash: str
    direction: ProofDirection

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary."""
        return {"hash": self.hash, "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "ProofElement":
        """Deserialize from dictionary."""
        return cls(
            hash=data["hash"],
            direction=ProofDirection(data["direction"]),
        )


@dataclass
class MerkleProof:
    """
    Result of an inclusion proof search.

    A NOT_FOUND proof always has an empty path; a FOUND proof may also have
    an empty path when the target is the root itself (single-leaf tree), so
    callers must look at ``status`` rather than the path length.

    Attributes:
        status: Whether the target hash was located in the tree
        target_hash: Hash that was searched for
        proof_path: Sibling hashes from the target up to just below the root
        root_hash: Merkle root of the tree the proof was taken from
        tree_size: Total number of leaves in the tree
        leaf_index: Input position of the matched leaf, if it is a leaf
    """

    status: ProofStatus
    target_hash: str
    proof_path: list[ProofElement]
    root_hash: str
    tree_size: int
    leaf_index: int | None = None

    @property
    def found(self) -> bool:
        return self.status == ProofStatus.FOUND

    @property
    def hashes(self) -> list[str]:
        """Sibling hashes in leaf-to-root order, without directions."""
        return [element.hash for element in self.proof_path]

    def to_dict(self) -> dict[str, Any]:
        """Serialize proof to dictionary."""
        return {
            "status": self.status.value,
            "target_hash": self.target_hash,
            "leaf_index": self.leaf_index,
            "proof_path": [e.to_dict() for e in self.proof_path],
            "root_hash": self.root_hash,
            "tree_size": self.tree_size,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MerkleProof":
        """Deserialize proof from dictionary."""
        return cls(
            status=ProofStatus(data["status"]),
            target_hash=data["target_hash"],
            proof_path=[ProofElement.from_dict(e) for e in data["proof_path"]],
            root_hash=data["root_hash"],
            tree_size=data["tree_size"],
            leaf_index=data.get("leaf_index"),
        )

    def to_compact(self) -> list[str]:
        """
        Convert proof path to compact string format.

        Format: ["L:hash1", "R:hash2", ...]
        """
        return [f"{e.direction.value}:{e.hash}" for e in self.proof_path]

    @classmethod
    def from_compact(
        cls,
        target_hash: str,
        compact_path: list[str],
        root_hash: str,
        tree_size: int,
        leaf_index: int | None = None,
    ) -> "MerkleProof":
        """Create a FOUND proof from compact format."""
        proof_path = []
        for item in compact_path:
            direction, hash_value = item.split(":", 1)
            proof_path.append(
                ProofElement(
                    hash=hash_value,
                    direction=ProofDirection(direction),
                )
            )
        return cls(
            status=ProofStatus.FOUND,
            target_hash=target_hash,
            proof_path=proof_path,
            root_hash=root_hash,
            tree_size=tree_size,
            leaf_index=leaf_index,
        )


class MerkleTree:
    """
    Merkle tree implementation with Keccak-256 hashing.

    Features:
    - Deterministic construction from ordered leaves
    - Odd trailing nodes carried forward to the next level
    - Proof extraction by target hash with explicit found/not-found status
    - Immutable after construction

    Example:
        >>> tree = MerkleTree.from_leaves(["0xAAA", "0xBBB", "0xCCC"])
        >>> proof = tree.get_proof_for("0xAAA")
        >>> verify_proof(proof)
        True
    """

    def __init__(
        self,
        nodes: list[MerkleNode],
        leaf_indices: list[int],
        parents: list[int | None],
        root_index: int,
        depth: int,
    ) -> None:
        """
        Initialize Merkle tree (internal use).

        Use from_leaves() or from_hashes() to construct trees.
        """
        self._nodes = nodes
        self._leaf_indices = leaf_indices
        self._parents = parents
        self._root_index = root_index
        self._depth = depth

    @classmethod
    def from_leaves(cls, leaves: Sequence[bytes | str]) -> "MerkleTree":
        """
        Construct a Merkle tree from leaf data.

        Args:
            leaves: Ordered leaf values (addresses as str, or raw bytes)

        Returns:
            Constructed MerkleTree

        Raises:
            EmptyTreeError: If leaves is empty
        """
        if not leaves:
            raise EmptyTreeError("Cannot create Merkle tree from empty leaves")

        leaf_nodes = []
        for i, value in enumerate(leaves):
            data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
            leaf_nodes.append(
                MerkleNode(
                    hash=leaf_hash(data),
                    data=data,
                    position=i,
                )
            )

        return cls._build_tree(leaf_nodes)

    @classmethod
    def from_hashes(cls, hashes: Sequence[str]) -> "MerkleTree":
        """
        Construct a Merkle tree using pre-computed hashes directly as leaves.

        Args:
            hashes: Hex-encoded leaf hashes, with or without 0x prefix

        Raises:
            EmptyTreeError: If hashes is empty
            InvalidDigestError: If a hash is not a 32-byte hex digest
        """
        if not hashes:
            raise EmptyTreeError("Cannot create Merkle tree from empty hashes")

        leaf_nodes = [
            MerkleNode(hash=normalize_digest(hash_value), position=i)
            for i, hash_value in enumerate(hashes)
        ]
        return cls._build_tree(leaf_nodes)

    @classmethod
    def _build_tree(cls, leaf_nodes: list[MerkleNode]) -> "MerkleTree":
        """Build tree bottom-up from leaf nodes."""
        nodes: list[MerkleNode] = list(leaf_nodes)
        parents: list[int | None] = [None] * len(nodes)
        leaf_indices = list(range(len(nodes)))

        current_level = leaf_indices
        depth = 0

        while len(current_level) > 1:
            next_level = []

            for i in range(0, len(current_level), 2):
                if i + 1 < len(current_level):
                    left = current_level[i]
                    right = current_level[i + 1]
                    parent_index = len(nodes)
                    nodes.append(
                        MerkleNode(
                            hash=pair_hash(nodes[left].hash, nodes[right].hash),
                            left=left,
                            right=right,
                        )
                    )
                    parents.append(None)
                    parents[left] = parent_index
                    parents[right] = parent_index
                    next_level.append(parent_index)
                else:
                    # Odd case: carry the last node up unchanged
                    next_level.append(current_level[i])

            current_level = next_level
            depth += 1

        return cls(nodes, leaf_indices, parents, current_level[0], depth)

    @property
    def root(self) -> MerkleNode:
        """Get the root node."""
        return self._nodes[self._root_index]

    @property
    def root_hash(self) -> str:
        """Get the root hash (Merkle root)."""
        return self.root.hash

    @property
    def nodes(self) -> list[MerkleNode]:
        """All nodes in arena order: leaves first, then parents as built."""
        return list(self._nodes)

    @property
    def leaves(self) -> list[MerkleNode]:
        """Get all leaf nodes."""
        return [self._nodes[i] for i in self._leaf_indices]

    @property
    def leaf_count(self) -> int:
        return len(self._leaf_indices)

    @property
    def depth(self) -> int:
        """Number of pairing rounds between the leaves and the root."""
        return self._depth

    def node(self, index: int) -> MerkleNode:
        """Get a node by arena index."""
        return self._nodes[index]

    def parent_of(self, index: int) -> int | None:
        """Arena index of the node's parent, or None for the root."""
        return self._parents[index]

    def get_leaf_hash(self, index: int) -> str:
        """
        Get the hash of a leaf by index.

        Raises:
            IndexError: If index out of bounds
        """
        if index < 0 or index >= len(self._leaf_indices):
            raise IndexError(f"Leaf index {index} out of bounds")
        return self._nodes[self._leaf_indices[index]].hash

    def find(self, target_hash: str) -> int | None:
        """
        Locate the first node matching a hash.

        Search is depth-first from the root, checking a node before its
        subtrees and the left subtree before the right one.

        Returns:
            Arena index of the match, or None
        """
        stack = [self._root_index]
        while stack:
            index = stack.pop()
            node = self._nodes[index]
            if node.hash == target_hash:
                return index
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return None

    def get_proof(self, target_hash: str) -> MerkleProof:
        """
        Generate an inclusion proof for a target hash.

        Args:
            target_hash: Hash to prove, with or without 0x prefix

        Returns:
            MerkleProof with status FOUND and the sibling path from the
            target up to just below the root, or status NOT_FOUND

        Raises:
            InvalidDigestError: If target_hash is not a 32-byte hex digest
        """
        target = normalize_digest(target_hash)
        index = self.find(target)

        if index is None:
            return MerkleProof(
                status=ProofStatus.NOT_FOUND,
                target_hash=target,
                proof_path=[],
                root_hash=self.root_hash,
                tree_size=self.leaf_count,
            )

        return self._proof_from(index)

    def _proof_from(self, index: int) -> MerkleProof:
        """Walk parent links from an arena index up to the root."""
        proof_path = []
        current = index
        parent = self._parents[current]
        while parent is not None:
            parent_node = self._nodes[parent]
            if parent_node.left == current:
                # Current is left, sibling is right
                sibling = self._nodes[parent_node.right]
                proof_path.append(
                    ProofElement(hash=sibling.hash, direction=ProofDirection.RIGHT)
                )
            else:
                sibling = self._nodes[parent_node.left]
                proof_path.append(
                    ProofElement(hash=sibling.hash, direction=ProofDirection.LEFT)
                )
            current = parent
            parent = self._parents[current]

        return MerkleProof(
            status=ProofStatus.FOUND,
            target_hash=self._nodes[index].hash,
            proof_path=proof_path,
            root_hash=self.root_hash,
            tree_size=self.leaf_count,
            leaf_index=self._nodes[index].position,
        )

    def get_proof_for(self, value: bytes | str) -> MerkleProof:
        """Generate an inclusion proof for a raw leaf value (e.g. an address)."""
        return self.get_proof(leaf_hash(value))

    def get_proof_by_index(self, leaf_index: int) -> MerkleProof:
        """
        Generate inclusion proof for the leaf at an input position.

        Raises:
            IndexError: If leaf_index out of bounds
        """
        if leaf_index < 0 or leaf_index >= len(self._leaf_indices):
            raise IndexError(f"Leaf index {leaf_index} out of bounds")
        return self._proof_from(self._leaf_indices[leaf_index])

    def get_all_proofs(self) -> list[MerkleProof]:
        """Generate proofs for all leaves, in leaf order."""
        return [self.get_proof_by_index(i) for i in range(self.leaf_count)]

    def to_dict(self) -> dict[str, Any]:
        """
        Nested representation of the tree for display.

        Each node is ``{"hash": ..., "left": ..., "right": ...}`` with None
        for absent children.
        """
        return self._node_to_dict(self._root_index)

    def _node_to_dict(self, index: int) -> dict[str, Any]:
        node = self._nodes[index]
        return {
            "hash": node.hash,
            "left": self._node_to_dict(node.left) if node.left is not None else None,
            "right": self._node_to_dict(node.right) if node.right is not None else None,
        }


def compute_root_from_proof(leaf_hash: str, proof_path: list[ProofElement]) -> str:
    """
    Compute the root hash from a leaf and proof path.

    Args:
        leaf_hash: Hash of the leaf
        proof_path: List of proof elements

    Returns:
        Computed root hash
    """
    current_hash = leaf_hash

    for element in proof_path:
        if element.direction == ProofDirection.LEFT:
            # Sibling is on the left
            current_hash = pair_hash(element.hash, current_hash)
        else:
            # Sibling is on the right
            current_hash = pair_hash(current_hash, element.hash)

    return current_hash


def verify_proof_against_root(
    leaf_hash: str,
    proof_path: list[ProofElement],
    expected_root: str,
) -> bool:
    """Verify a proof path reconstructs to a specific root hash."""
    return compute_root_from_proof(leaf_hash, proof_path) == expected_root


def verify_proof(proof: MerkleProof) -> bool:
    """
    Verify a Merkle inclusion proof.

    Reconstructs the root hash from the target hash and proof path, then
    compares with the expected root. NOT_FOUND proofs never verify.
    """
    if not proof.found:
        return False
    return verify_proof_against_root(proof.target_hash, proof.proof_path, proof.root_hash)
