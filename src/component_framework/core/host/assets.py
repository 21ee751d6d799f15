# src/component_framework/core/host/assets.py
"""
Ambiente de assets da aplicação host.

Modelo mínimo de um asset pipeline:
    - `AssetEnvironment`: load paths, preprocessadores por MIME type,
      transformers entre MIME types e resolução de arquivos
    - `DirectiveProcessor`: interpreta diretivas no cabeçalho de JS/CSS
      (`//= require foo`, `*= require_self`)
    - `StylesheetImporter` / `ScssTemplate`: expansão de `@import` em SCSS

Preprocessadores são factories `(environment, filename, content_type)`
que devolvem um objeto com `call(source) -> str`; o próprio
`DirectiveProcessor` é uma delas.

Limites explícitos:
    - Não compila Sass nem minifica nada
    - Não gera digests nem escreve arquivos compilados
"""

from __future__ import annotations

import logging
import re
import shlex
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)

JAVASCRIPT = "application/javascript"
CSS = "text/css"
SCSS = "text/scss"

MIME_TYPES = {
    ".js": JAVASCRIPT,
    ".css": CSS,
    ".scss": SCSS,
}
EXTENSIONS = {mime: ext for ext, mime in MIME_TYPES.items()}

# SCSS passa pelos mesmos preprocessadores de CSS antes do transformer.
PREPROCESS_AS = {SCSS: CSS}

DIRECTIVE_PATTERN = re.compile(r"^\W*=\s*(\w+)(?:\s+(.*?))?\s*(?:\*/)?\s*$")
IMPORT_PATTERN = re.compile(r"""^\s*@import\s+["']([^"']+)["']\s*;?\s*$""")

PreprocessorFactory = Callable[["AssetEnvironment", Path, str], Any]


@dataclass(frozen=True)
class ProcessedAsset:
    filename: Path
    content_type: str
    source: str
    required: Tuple[Path, ...] = ()
    dependencies: frozenset = frozenset()


class AssetEnvironment:
    """Registro de processadores e resolução de assets sobre load paths."""

    def __init__(self, paths: Iterable[Path] = ()):
        self.paths: List[Path] = [Path(p) for p in paths]
        self._preprocessors: Dict[str, List[PreprocessorFactory]] = defaultdict(list)
        self._transformers: Dict[Tuple[str, str], Any] = {}

    @classmethod
    def default(cls, paths: Iterable[Path] = ()) -> "AssetEnvironment":
        env = cls(paths)
        env.register_preprocessor(JAVASCRIPT, DirectiveProcessor)
        env.register_preprocessor(CSS, DirectiveProcessor)
        return env

    # -----------------------------
    # Registration
    # -----------------------------
    def register_preprocessor(self, mime_type: str, processor: PreprocessorFactory) -> None:
        self._preprocessors[mime_type].append(processor)

    def unregister_preprocessor(self, mime_type: str, processor: PreprocessorFactory) -> None:
        registered = self._preprocessors.get(mime_type, [])
        if processor in registered:
            registered.remove(processor)

    def preprocessors(self, mime_type: str) -> List[PreprocessorFactory]:
        return list(self._preprocessors.get(mime_type, []))

    def register_transformer(self, source_type: str, target_type: str, transformer: Any) -> None:
        self._transformers[(source_type, target_type)] = transformer

    def transformer(self, source_type: str, target_type: str) -> Optional[Any]:
        return self._transformers.get((source_type, target_type))

    # -----------------------------
    # Resolution
    # -----------------------------
    @staticmethod
    def content_type_of(filename: Path) -> Optional[str]:
        return MIME_TYPES.get(Path(filename).suffix)

    def resolve(self, path: str, base_path: Optional[Path] = None, content_type: Optional[str] = None) -> Path:
        """
        Resolve `path` para um arquivo existente.

        Caminhos absolutos são aceitos como estão; caminhos relativos
        (`./x`, `../x`) partem de `base_path`; nomes lógicos são procurados
        em `base_path` e depois nos load paths. Sem extensão, a extensão
        padrão de `content_type` é tentada.

        Raises:
            FileNotFoundError: Se nenhum candidato existir.
        """
        target = Path(path)
        names = [target]
        if not target.suffix and content_type in EXTENSIONS:
            names.append(target.with_suffix(EXTENSIONS[content_type]))

        if target.is_absolute():
            roots: List[Optional[Path]] = [None]
        elif path.startswith(("./", "../")):
            roots = [base_path]
        else:
            roots = [base_path, *self.paths]

        for root in roots:
            for name in names:
                candidate = name if root is None else Path(root) / name
                if candidate.is_file():
                    return candidate.resolve()

        raise FileNotFoundError(f"couldn't find file '{path}' under {base_path}")

    # -----------------------------
    # Processing
    # -----------------------------
    def process(self, filename: Path) -> ProcessedAsset:
        filename = Path(filename).resolve()
        content_type = self.content_type_of(filename)
        if content_type is None:
            raise ValueError(f"unsupported asset type: {filename.suffix}")

        source = filename.read_text(encoding="utf-8")
        required: List[Path] = []
        dependencies: Set[Path] = set()

        for factory in self.preprocessors(PREPROCESS_AS.get(content_type, content_type)):
            processor = factory(self, filename, content_type)
            source = processor.call(source)
            required.extend(p for p in getattr(processor, "required", []) if p not in required)
            dependencies.update(getattr(processor, "dependencies", ()))

        transformer = self.transformer(content_type, CSS) if content_type == SCSS else None
        if transformer is not None:
            source = transformer.call(self, filename, source)
            dependencies.update(getattr(transformer, "last_dependencies", ()))
            content_type = CSS

        return ProcessedAsset(
            filename=filename,
            content_type=content_type,
            source=source,
            required=tuple(required),
            dependencies=frozenset(dependencies),
        )


def split_header(source: str) -> Tuple[List[str], List[str]]:
    """Separa o cabeçalho de comentários (onde vivem as diretivas) do corpo."""
    lines = source.splitlines(keepends=True)
    in_block = False
    end = 0
    for index, line in enumerate(lines):
        stripped = line.strip()
        if in_block:
            in_block = "*/" not in stripped
        elif not stripped or stripped.startswith(("//", "#")):
            pass
        elif stripped.startswith("/*"):
            in_block = "*/" not in stripped[2:]
        else:
            break
        end = index + 1
    return lines[:end], lines[end:]


class DirectiveProcessor:
    """
    Processa diretivas do cabeçalho de um asset.

    Cada diretiva `name` é despachada para `process_<name>_directive`; a
    linha da diretiva vira uma linha em branco, preservando a numeração do
    corpo. Linhas sem método correspondente ficam intactas. Subclasses
    adicionam diretivas definindo novos métodos.
    """

    def __init__(self, environment: AssetEnvironment, filename: Path, content_type: str):
        self.environment = environment
        self.filename = Path(filename)
        self.dirname = self.filename.parent
        self.content_type = content_type
        self.required: List[Path] = []
        self.dependencies: Set[Path] = set()

    def call(self, source: str) -> str:
        header, body = split_header(source)
        kept: List[str] = []
        for line in header:
            match = DIRECTIVE_PATTERN.match(line)
            if match is None:
                kept.append(line)
                continue

            name, raw_args = match.group(1), match.group(2) or ""
            method = getattr(self, f"process_{name}_directive", None)
            if method is None:
                # comentário comum com cara de diretiva (`/* ==== Layout ==== */`)
                kept.append(line)
                continue
            method(*shlex.split(raw_args))
            kept.append("\n")

        return "".join(kept + body)

    def _require(self, path: Path) -> None:
        if path not in self.required:
            self.required.append(path)
        self.dependencies.add(path)

    def resolve(self, path: str) -> Path:
        return self.environment.resolve(path, base_path=self.dirname, content_type=self.content_type)

    def process_require_directive(self, path: str) -> None:
        self._require(self.resolve(path))

    def process_require_self_directive(self) -> None:
        self._require(self.filename.resolve())

    def process_depend_on_directive(self, path: str) -> None:
        self.dependencies.add(self.resolve(path))


class StylesheetImporter:
    """Resolve alvos de `@import` relativos ao arquivo que importa."""

    def __init__(self, environment: Optional[AssetEnvironment] = None):
        self.environment = environment
        self.dependencies: Set[Path] = set()

    def depend_on(self, filename: Path) -> None:
        self.dependencies.add(Path(filename))

    def imports(self, path: str, parent_path: Path) -> List[Path]:
        base = Path(parent_path).parent
        target = Path(path)
        candidates = [target]
        if not target.suffix:
            partial = target.with_name(f"_{target.name}")
            candidates = [target.with_suffix(".scss"), partial.with_suffix(".scss"), target.with_suffix(".css")]

        for candidate in candidates:
            resolved = candidate if candidate.is_absolute() else base / candidate
            if resolved.is_file():
                self.depend_on(resolved)
                return [resolved.resolve()]

        raise FileNotFoundError(f"File to import not found or unreadable: {path} (from {parent_path})")


class ScssTemplate:
    """
    Transformer `text/scss -> text/css` que expande `@import` em linha.

    `config_options()` define o importer usado; subclasses trocam o importer
    sem reimplementar a expansão.
    """

    def __init__(self) -> None:
        self.last_dependencies: Set[Path] = set()

    def config_options(self) -> Dict[str, Any]:
        return {"importer": StylesheetImporter}

    def call(self, environment: AssetEnvironment, filename: Path, source: str) -> str:
        importer = self.config_options()["importer"](environment)
        output = self._expand(importer, Path(filename), source, seen={Path(filename).resolve()})
        self.last_dependencies = set(importer.dependencies)
        return output

    def _expand(self, importer: StylesheetImporter, filename: Path, source: str, seen: Set[Path]) -> str:
        out: List[str] = []
        for line in source.splitlines(keepends=True):
            match = IMPORT_PATTERN.match(line)
            if match is None:
                out.append(line)
                continue
            for imported in importer.imports(match.group(1), filename):
                if imported in seen:
                    continue
                seen.add(imported)
                text = imported.read_text(encoding="utf-8")
                expanded = self._expand(importer, imported, text, seen)
                out.append(expanded if expanded.endswith("\n") else expanded + "\n")
        return "".join(out)
