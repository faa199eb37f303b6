"""Tests for language detection and per-language extraction rules."""

import pytest
from sherlock_indexer.parser import detect_language, parse_source


@pytest.mark.parametrize("path,language", [
    ("src/lib.rs", "rust"),
    ("app.js", "javascript"),
    ("App.jsx", "javascript"),
    ("index.mjs", "javascript"),
    ("config.cjs", "javascript"),
    ("service.ts", "typescript"),
    ("App.tsx", "tsx"),
    ("cmd/main.go", "go"),
    ("tool.py", "python"),
    ("Calculator.java", "java"),
    ("widget.cpp", "cpp"),
    ("widget.cc", "cpp"),
    ("widget.cxx", "cpp"),
    ("main.c", "cpp"),
    ("widget.h", "cpp"),
    ("widget.hpp", "cpp"),
])
def test_detect_language(path, language):
    """Test every supported extension maps to its language."""
    assert detect_language(path) == language


def test_detect_language_is_case_insensitive():
    """Test extensions are lowercased before lookup."""
    assert detect_language("LIB.RS") == "rust"
    assert detect_language("Main.Java") == "java"


@pytest.mark.parametrize("path", [
    "README.md",
    "Makefile",
    "archive.tar.gz",
    ".bashrc",
    "src/",
    "",
])
def test_detect_language_unsupported(path):
    """Test unknown or missing extensions return None."""
    assert detect_language(path) is None


RUST_SOURCE = '''pub struct User {
    name: String,
}

impl User {
    pub fn new(name: &str) -> Self {
        Self { name: name.to_string() }
    }

    fn secret(&self) -> &str {
        &self.name
    }
}

enum State { On, Off }

pub trait Named {}

type Id = u64;

const MAX_USERS: usize = 1000;

pub static GREETING: &str = "hi";
'''


def test_parse_rust():
    """Test Rust item kinds and visibility."""
    symbols = parse_source(RUST_SOURCE, "user.rs", "rust")
    by_name = {s.symbol_name: s for s in symbols}

    assert by_name["User"].symbol_type == "struct"
    assert by_name["User"].exported is True
    assert by_name["User"].visibility == "public"

    assert by_name["new"].symbol_type == "function"
    assert by_name["new"].exported is True

    assert by_name["secret"].symbol_type == "function"
    assert by_name["secret"].exported is False
    assert by_name["secret"].visibility == "private"

    assert by_name["State"].symbol_type == "enum"
    assert by_name["Named"].symbol_type == "trait"
    assert by_name["Id"].symbol_type == "type"
    assert by_name["MAX_USERS"].symbol_type == "const"
    assert by_name["GREETING"].symbol_type == "static"
    assert by_name["GREETING"].exported is True


def test_parse_rust_single_function():
    """Test a single public Rust function."""
    symbols = parse_source("pub fn foo() {}\n", "foo.rs", "rust")

    assert len(symbols) == 1
    sym = symbols[0]
    assert sym.symbol_type == "function"
    assert sym.symbol_name == "foo"
    assert sym.exported is True
    assert sym.visibility == "public"
    assert sym.line_start == 1
    assert sym.line_end == 1
    assert sym.signature == "pub fn foo() {}"
    assert sym.dependencies == []


def test_rust_impl_block_has_no_name_field():
    """Test impl blocks are skipped because they carry no name field."""
    symbols = parse_source(RUST_SOURCE, "user.rs", "rust")
    assert not [s for s in symbols if s.symbol_type == "impl"]


GO_SOURCE = '''package main

import "fmt"

type Person struct {
    Name string
}

func (p *Person) Greet() {
    fmt.Println("Hello, " + p.Name)
}

func Add(a, b int) int {
    return a + b
}

func helper() {}
'''


def test_parse_go():
    """Test Go functions, methods and export convention."""
    symbols = parse_source(GO_SOURCE, "main.go", "go")
    by_name = {s.symbol_name: s for s in symbols}

    assert by_name["Greet"].symbol_type == "method"
    assert by_name["Greet"].exported is True

    assert by_name["Add"].symbol_type == "function"
    assert by_name["Add"].exported is True
    assert by_name["Add"].signature == "func Add(a, b int) int {"

    assert by_name["helper"].exported is False
    assert all(s.visibility is None for s in symbols)


@pytest.mark.parametrize("source,exported", [
    ("package main\n\nfunc bar() {}\n", False),
    ("package main\n\nfunc Bar() {}\n", True),
])
def test_go_export_follows_capitalisation(source, exported):
    """Test Go exported flag follows the first letter of the name."""
    symbols = parse_source(source, "main.go", "go")

    assert len(symbols) == 1
    assert symbols[0].exported is exported


def test_go_type_declaration_has_no_name_field():
    """Test type declarations are skipped; the name lives on type_spec."""
    symbols = parse_source(GO_SOURCE, "main.go", "go")
    assert "Person" not in {s.symbol_name for s in symbols}


PYTHON_SOURCE = '''class Greeter:
    """Says hello."""

    def greet(self, name):
        return f"Hello, {name}"


def standalone(a, b):
    return a + b
'''


def test_parse_python():
    """Test Python classes and functions."""
    symbols = parse_source(PYTHON_SOURCE, "greeter.py", "python")

    assert [(s.symbol_type, s.symbol_name) for s in symbols] == [
        ("class", "Greeter"),
        ("function", "greet"),
        ("function", "standalone"),
    ]
    assert symbols[0].signature == "class Greeter:"
    assert symbols[1].signature == "def greet(self, name):"
    assert all(s.exported is False for s in symbols)
    assert all(s.visibility is None for s in symbols)


JAVA_SOURCE = '''public class Calculator {
    public int add(int a, int b) {
        return a + b;
    }

    private void reset() {
    }
}

interface Operable {
    int operate(int a, int b);
}
'''


def test_parse_java():
    """Test Java declarations are all reported public."""
    symbols = parse_source(JAVA_SOURCE, "Calculator.java", "java")
    by_name = {s.symbol_name: s for s in symbols}

    assert by_name["Calculator"].symbol_type == "class"
    assert by_name["add"].symbol_type == "method"
    assert by_name["Operable"].symbol_type == "interface"
    assert by_name["operate"].symbol_type == "method"

    # Modifiers are not inspected
    assert by_name["reset"].exported is True
    assert by_name["reset"].visibility == "public"


JAVASCRIPT_SOURCE = '''function greet(name) {
    return `Hello, ${name}!`;
}

class Calculator {
    add(a, b) {
        return a + b;
    }
}

const handler = function named() {};

var counter = 0;
'''


def test_parse_javascript():
    """Test JavaScript functions, classes and methods."""
    symbols = parse_source(JAVASCRIPT_SOURCE, "app.js", "javascript")
    by_name = {s.symbol_name: s for s in symbols}

    assert by_name["greet"].symbol_type == "function"
    assert by_name["Calculator"].symbol_type == "class"
    assert by_name["add"].symbol_type == "method"
    assert by_name["named"].symbol_type == "function"

    assert all(s.exported is False for s in symbols)
    assert all(s.visibility is None for s in symbols)


def test_javascript_export_keyword_is_not_detected():
    """Test exported stays False even with an export statement."""
    symbols = parse_source("export function api() {}\n", "api.js", "javascript")

    assert len(symbols) == 1
    assert symbols[0].symbol_name == "api"
    assert symbols[0].exported is False


TYPESCRIPT_SOURCE = '''interface User {
    name: string;
}

function getUser(id: number): User {
    return { name: "Test" };
}

class UserService {
    findById(id: number): User | undefined {
        return undefined;
    }
}
'''


def test_parse_typescript():
    """Test TypeScript uses the JavaScript rules."""
    symbols = parse_source(TYPESCRIPT_SOURCE, "service.ts", "typescript")
    by_name = {s.symbol_name: s for s in symbols}

    assert by_name["getUser"].symbol_type == "function"
    assert by_name["UserService"].symbol_type == "class"
    assert by_name["findById"].symbol_type == "method"
    assert "User" not in by_name


def test_parse_tsx():
    """Test TSX files parse with the TSX grammar."""
    source = "function App() {\n    return <div>Hello</div>;\n}\n"
    symbols = parse_source(source, "App.tsx", "tsx")

    assert len(symbols) == 1
    assert symbols[0].symbol_name == "App"
    assert symbols[0].line_start == 1
    assert symbols[0].line_end == 3


CPP_SOURCE = '''namespace app {

class Widget {
public:
    void draw();
};

}

int main() {
    return 0;
}
'''


def test_parse_cpp():
    """Test C++ namespaces and classes."""
    symbols = parse_source(CPP_SOURCE, "widget.cpp", "cpp")
    by_name = {s.symbol_name: s for s in symbols}

    assert by_name["app"].symbol_type == "namespace"
    assert by_name["app"].signature == "namespace app {"
    assert by_name["Widget"].symbol_type == "class"
    assert by_name["Widget"].line_start == 3
    assert all(s.exported is False for s in symbols)


def test_cpp_function_definition_has_no_name_field():
    """Test function definitions are skipped; the name lives on the declarator."""
    symbols = parse_source(CPP_SOURCE, "widget.cpp", "cpp")
    assert "main" not in {s.symbol_name for s in symbols}
