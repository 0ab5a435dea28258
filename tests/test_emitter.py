# SPDX-PackageName: resolvergen
# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: Copyright the resolvergen authors and contributors.

"""End-to-end tests: GraphQL SDL in, TypeScript module text out."""

from __future__ import annotations
from typing import Any

import textwrap
import unittest

import graphql

from resolvergen import ConfigError, generate, generate_from_sdl
from resolvergen._internal._codegen import (
    SymbolRef,
    emit,
)
from resolvergen._internal._codegen import _declarations as decl
from resolvergen._internal._codegen._emitter import TypeScriptEmitter
from resolvergen._internal._codegen._typeexpr import (
    BOOLEAN,
    NUMBER,
    STRING,
    ExternalRef,
    ListOf,
    NamedRef,
    Nullable,
    UnionOf,
)


def run(sdl: str, **config: Any) -> str:
    return generate_from_sdl(
        textwrap.dedent(sdl),
        {"contextType": "./context#Context", **config},
    )


def block(text: str) -> str:
    return textwrap.dedent(text).strip("\n")


class TestTypeRendering(unittest.TestCase):
    def render(self, expr: Any) -> str:
        return TypeScriptEmitter().render_type(expr)

    def test_primitives_and_nullability(self) -> None:
        self.assertEqual(self.render(STRING), "string")
        self.assertEqual(
            self.render(Nullable(inner=NUMBER)), "number | null | undefined"
        )

    def test_list_forms(self) -> None:
        cases = [
            (ListOf(element=STRING, mutable=False, generic=False),
             "readonly string[]"),
            (ListOf(element=STRING, mutable=True, generic=False),
             "string[]"),
            (ListOf(element=Nullable(inner=STRING), mutable=False,
                    generic=True),
             "ReadonlyArray<string | null | undefined>"),
            (ListOf(element=Nullable(inner=STRING), mutable=True,
                    generic=True),
             "Array<string | null | undefined>"),
        ]
        for expr, expected in cases:
            with self.subTest(expected=expected):
                self.assertEqual(self.render(expr), expected)

    def test_nested_lists(self) -> None:
        inner_ro = ListOf(element=BOOLEAN, mutable=False, generic=False)
        self.assertEqual(
            self.render(ListOf(element=inner_ro, mutable=False, generic=False)),
            "readonly (readonly boolean[])[]",
        )
        inner_mut = ListOf(element=BOOLEAN, mutable=True, generic=False)
        self.assertEqual(
            self.render(ListOf(element=inner_mut, mutable=True, generic=False)),
            "boolean[][]",
        )

    def test_unions(self) -> None:
        expr = UnionOf(members=(NamedRef(name="A"), NamedRef(name="B")))
        self.assertEqual(self.render(expr), "A | B")
        self.assertEqual(
            self.render(ListOf(element=expr, mutable=True, generic=True)),
            "Array<A | B>",
        )


class TestModuleOutput(unittest.TestCase):
    def test_complete_module(self) -> None:
        code = run(
            """
            scalar Date
            scalar DateTime

            type Author {
              name: String!
              birthday: Date
              birthdayPartyScheduled: DateTime
            }

            type Query {
              authors: [Author!]!
            }
            """,
            scalars={"Date": "Date", "DateTime": "Date"},
        )
        expected = block(
            """
            import { type GraphQLResolveInfo, GraphQLScalarType } from "graphql";
            import { Context } from "./context";

            export interface Resolvers {
              Query: QueryResolvers;
              Author?: AuthorResolvers;
              Date: GraphQLScalarType;
              DateTime: GraphQLScalarType;
            }

            export type UnionResolvers = {};

            export interface QueryResolvers {
              authors: Resolver<{}, {}, readonly Author[]>;
            }

            export interface AuthorResolvers {
              name: Resolver<Author, {}, string>;
              birthday: Resolver<Author, {}, Date | null | undefined>;
              birthdayPartyScheduled: Resolver<Author, {}, Date | null | undefined>;
            }

            type MaybePromise<T> = T | Promise<T>;
            export type Resolver<R, A, T> = (root: R, args: A, ctx: Context, info: GraphQLResolveInfo) => MaybePromise<T>;

            export type SubscriptionResolverFilter<R, A, T> = (
              root: R | undefined,
              args: A,
              ctx: Context,
              info: GraphQLResolveInfo,
            ) => boolean | Promise<boolean>;
            export type SubscriptionResolver<R, A, T> = {
              subscribe: (root: R | undefined, args: A, ctx: Context, info: GraphQLResolveInfo) => AsyncIterator<T>;
            };

            export interface Author {
              name: string;
              birthday: Date | null | undefined;
              birthdayPartyScheduled: Date | null | undefined;
            }
            """
        )
        self.assertEqual(code, expected + "\n")

    def test_preamble(self) -> None:
        out = emit(
            decl.DeclarationSet(
                declarations=(
                    decl.UnionAlias(
                        name="Nothing", members=()
                    ),
                )
            ),
            preamble="// generated",
        )
        self.assertEqual(out, "// generated\n\nexport type Nothing = never;\n")

    def test_enum_reexport_needs_a_module(self) -> None:
        declarations = decl.DeclarationSet(
            declarations=(
                decl.EnumReexport(
                    name="Status", symbol=SymbolRef(name="StatusEnum")
                ),
            )
        )
        with self.assertRaisesRegex(ConfigError, "Status"):
            emit(declarations)

    def test_generate_accepts_graphql_schema(self) -> None:
        schema = graphql.build_schema("type Query { ping: String }")
        code = generate(schema, {"contextType": "Context"})
        self.assertIn(
            "ping: Resolver<{}, {}, string | null | undefined>;", code
        )
        self.assertIn('import type { GraphQLResolveInfo } from "graphql";', code)
        self.assertNotIn("GraphQLScalarType", code)


class TestInterfaces(unittest.TestCase):
    SDL = """
        interface HasName {
          name: String!
        }

        interface FieldWithArgs {
          field1(input: Boolean): Boolean
        }

        interface Node {
          id: ID!
        }

        type Author implements HasName & FieldWithArgs & Node {
          id: ID!
          name: String!
          bio: String
          field1(input: Boolean): Boolean
        }

        type Book implements HasName & Node {
          id: ID!
          name: String!
          isbn: String
        }

        type Article implements HasName {
          name: String!
          content: String!
        }

        type Container {
          item: HasName
          requiredItem: HasName!
          items: [HasName!]
          requiredItems: [HasName!]!
          nodeItem: Node
          nodeItems: [Node!]!
        }

        type Query {
          getByName(name: String!): HasName
          getAllNamed: [HasName!]!
          getNode(id: ID!): Node
          container: Container!
        }
    """

    def setUp(self) -> None:
        self.code = run(self.SDL)

    def test_interface_data_shapes(self) -> None:
        self.assertIn(
            block(
                """
                export interface HasName {
                  name: string;
                }
                """
            ),
            self.code,
        )
        self.assertIn(
            block(
                """
                export interface FieldWithArgs {
                  field1: boolean | null | undefined;
                }
                """
            ),
            self.code,
        )

    def test_implementor_data_shapes_keep_all_fields(self) -> None:
        self.assertIn(
            block(
                """
                export interface Author {
                  id: string;
                  name: string;
                  bio: string | null | undefined;
                  field1: boolean | null | undefined;
                }
                """
            ),
            self.code,
        )

    def test_implementors_aliases(self) -> None:
        self.assertIn(
            "export type HasNameTypes = Author | Book | Article;", self.code
        )
        self.assertIn("export type NodeTypes = Author | Book;", self.code)
        self.assertIn("export type FieldWithArgsTypes = Author;", self.code)

    def test_interface_fields(self) -> None:
        self.assertIn(
            block(
                """
                export interface Container {
                  item: HasName | null | undefined;
                  requiredItem: HasName;
                  items: Array<HasName> | null | undefined;
                  requiredItems: Array<HasName>;
                  nodeItem: Node | null | undefined;
                  nodeItems: Array<Node>;
                }
                """
            ),
            self.code,
        )
        self.assertIn(
            "getByName: Resolver<{}, QueryGetByNameArgs, "
            "HasName | null | undefined>;",
            self.code,
        )
        self.assertIn(
            "getAllNamed: Resolver<{}, {}, ReadonlyArray<HasName>>;",
            self.code,
        )

    def test_discrimination_table_wraps(self) -> None:
        self.assertIn(
            block(
                """
                export type UnionResolvers = {
                  HasName: { __resolveType(o: Author | Book | Article): string };
                  FieldWithArgs: { __resolveType(o: Author): string };
                  Node: { __resolveType(o: Author | Book): string };
                };
                """
            ),
            self.code,
        )

    def test_generic_contracts(self) -> None:
        self.assertIn(
            block(
                """
                export interface FieldWithArgsResolvers<T> {
                  field1: Resolver<T, FieldWithArgsField1Args, boolean | null | undefined>;
                }
                """
            ),
            self.code,
        )
        self.assertIn(
            block(
                """
                export interface FieldWithArgsField1Args {
                  input?: boolean | null | undefined;
                }
                """
            ),
            self.code,
        )

    def test_implementors_extend_contracts(self) -> None:
        self.assertIn(
            block(
                """
                export interface AuthorResolvers extends HasNameResolvers<Author>, FieldWithArgsResolvers<Author>, NodeResolvers<Author> {
                  bio: Resolver<Author, {}, string | null | undefined>;
                }
                """
            ),
            self.code,
        )
        self.assertIn(
            "export interface ArticleResolvers extends "
            "HasNameResolvers<Article> {\n"
            "  content: Resolver<Article, {}, string>;\n"
            "}",
            self.code,
        )
        # author has no argument record of its own for the inherited field
        self.assertNotIn("AuthorField1Args", self.code)

    def test_contract_with_every_field_inherited(self) -> None:
        code = run(
            """
            interface HasName {
              name: String!
            }

            type Tag implements HasName {
              name: String!
            }

            type Query {
              tags: [Tag!]!
            }
            """
        )
        self.assertIn(
            "export interface TagResolvers extends HasNameResolvers<Tag> {}",
            code,
        )


class TestMappers(unittest.TestCase):
    def test_mapped_objects(self) -> None:
        code = run(
            """
            type Author {
              name: String!
              books: [Book!]!
            }

            type Book {
              name: String!
              author: Author!
            }

            type Query {
              books: [Book!]!
              booksOrNull: [Book]!
            }
            """,
            mappers={
                "Author": "./entities#AuthorEntity",
                "Book": "./entities#BookEntity",
            },
        )
        self.assertIn(
            'import { AuthorEntity, BookEntity } from "./entities";', code
        )
        self.assertIn(
            "books: Resolver<AuthorEntity, {}, readonly BookEntity[]>;", code
        )
        self.assertIn(
            "booksOrNull: Resolver<{}, {}, "
            "ReadonlyArray<BookEntity | null | undefined>>;",
            code,
        )
        self.assertIn("Author: AuthorResolvers;", code)
        self.assertIn("Book: BookResolvers;", code)
        # mapped types have no data shape
        self.assertNotIn("export interface Author {", code)
        self.assertNotIn("export interface Book {", code)

    def test_mapped_implementors_join_interface_field_type(self) -> None:
        code = run(
            """
            interface HasName {
              name: String!
            }

            type Author implements HasName {
              name: String!
            }

            type Book implements HasName {
              name: String!
            }

            type Query {
              named: [HasName!]!
            }
            """,
            mappers={"Author": "./entities#AuthorEntity"},
        )
        self.assertIn(
            "named: Resolver<{}, {}, ReadonlyArray<AuthorEntity | HasName>>;",
            code,
        )
        self.assertIn("export type HasNameTypes = AuthorEntity | Book;", code)
        self.assertIn(
            "export interface AuthorResolvers extends "
            "HasNameResolvers<AuthorEntity> {}",
            code,
        )

    def test_mapped_interfaces(self) -> None:
        code = run(
            """
            interface Publisher {
              name: String
              country: String
            }

            type SmallPublisher implements Publisher {
              name: String
              country: String
              employees: Int
            }

            type Book {
              title: String!
              publisher: Publisher
            }

            type Query {
              publishers: [Publisher!]!
              getPublisher(id: ID!): Publisher
            }
            """,
            mappers={"Publisher": "./entities#PublisherEntity"},
        )
        self.assertIn(
            block(
                """
                export interface Book {
                  title: string;
                  publisher: PublisherEntity | null | undefined;
                }
                """
            ),
            code,
        )
        self.assertIn(
            "publishers: Resolver<{}, {}, ReadonlyArray<PublisherEntity>>;",
            code,
        )
        self.assertIn(
            "getPublisher: Resolver<{}, QueryGetPublisherArgs, "
            "PublisherEntity | null | undefined>;",
            code,
        )
        self.assertIn(
            "Publisher: { __resolveType(o: PublisherEntity): string }", code
        )
        self.assertNotIn("PublisherResolvers<T>", code)
        self.assertIn(
            block(
                """
                export interface SmallPublisherResolvers {
                  name: Resolver<SmallPublisher, {}, string | null | undefined>;
                  country: Resolver<SmallPublisher, {}, string | null | undefined>;
                  employees: Resolver<SmallPublisher, {}, number | null | undefined>;
                }
                """
            ),
            code,
        )

    def test_subpath_and_default_imports(self) -> None:
        code = run(
            """
            scalar DateTime

            type User {
              createdAt: DateTime!
            }

            type Query {
              me: User
            }
            """,
            contextType="#src/context#default",
            scalars={"DateTime": "#lib/scalars#default"},
            mappers={"User": "\\#src/entities#UserEntity"},
        )
        self.assertIn('import Context from "#src/context";', code)
        self.assertIn('import DateTime from "#lib/scalars";', code)
        self.assertIn('import { UserEntity } from "#src/entities";', code)
        self.assertIn("me: Resolver<{}, {}, UserEntity | null | undefined>;", code)

    def test_local_name_collisions_are_aliased(self) -> None:
        code = run(
            """
            type Author {
              name: String!
            }

            type Book {
              author: Author
            }

            type Query {
              book: Book
            }
            """,
            mappers={"Book": "./models#Author"},
        )
        self.assertIn('import { Author as Author_1 } from "./models";', code)
        self.assertIn("Book: BookResolvers;", code)
        self.assertIn(
            "author: Resolver<Author_1, {}, Author | null | undefined>;", code
        )
        self.assertIn("export interface Author {", code)


class TestEnums(unittest.TestCase):
    SDL = """
        enum Status {
          ACTIVE
          IN_PROGRESS
        }

        enum Priority {
          LOW
          HIGH
        }

        type User {
          status: Status!
          priority: Priority
        }

        type Query {
          users(status: Status, statuses: [Status!]!): [User!]!
        }
    """

    def test_enum_declarations(self) -> None:
        code = run(self.SDL)
        self.assertIn(
            block(
                """
                export enum Status {
                  Active = "ACTIVE",
                  InProgress = "IN_PROGRESS",
                }
                """
            ),
            code,
        )
        self.assertIn(
            block(
                """
                export interface QueryUsersArgs {
                  status?: Status | null | undefined;
                  statuses: Status[];
                }
                """
            ),
            code,
        )

    def test_enum_reexports(self) -> None:
        code = run(
            self.SDL,
            enumValues={
                "Status": "./enums#StatusEnum",
                "Priority": "#src/constants#default",
            },
        )
        self.assertIn('import Priority from "#src/constants";', code)
        self.assertIn('import { StatusEnum } from "./enums";', code)
        self.assertIn('export { StatusEnum } from "./enums";', code)
        self.assertIn(
            'export { default as Priority } from "#src/constants";', code
        )
        self.assertIn("status: StatusEnum;", code)
        self.assertNotIn("export enum", code)


class TestUnionsAndSubscriptions(unittest.TestCase):
    def test_unions(self) -> None:
        code = run(
            """
            type Author {
              id: ID!
            }

            type Book {
              id: ID!
            }

            union SearchResult = Author | Book
            union Anything = SearchResult | Author

            type Query {
              search(query: String!): [SearchResult!]!
              anything: Anything
            }
            """,
            mappers={"Author": "./entities#AuthorEntity"},
        )
        self.assertIn(
            "export type SearchResult = AuthorEntity | Book;", code
        )
        self.assertIn(
            "export type Anything = SearchResult | AuthorEntity;", code
        )
        self.assertIn(
            "search: Resolver<{}, QuerySearchArgs, "
            "ReadonlyArray<SearchResult>>;",
            code,
        )
        self.assertIn(
            block(
                """
                export type UnionResolvers = {
                  SearchResult: { __resolveType(o: AuthorEntity | Book): string };
                  Anything: { __resolveType(o: SearchResult | AuthorEntity): string };
                };
                """
            ),
            code,
        )

    def test_subscriptions(self) -> None:
        code = run(
            """
            type Post {
              id: ID!
            }

            type Query {
              post(id: ID!): Post
            }

            type Subscription {
              postCreated(authorId: ID): Post!
            }
            """
        )
        self.assertIn("Subscription?: SubscriptionResolvers;", code)
        self.assertIn(
            "postCreated: SubscriptionResolver<Subscription, "
            "SubscriptionPostCreatedArgs, Post>;",
            code,
        )
        self.assertIn(
            block(
                """
                export interface SubscriptionPostCreatedArgs {
                  authorId?: string | null | undefined;
                }
                """
            ),
            code,
        )


class TestImportCollation(unittest.TestCase):
    def test_imports_are_grouped_and_sorted(self) -> None:
        emitter = TypeScriptEmitter()
        for symbol in (
            SymbolRef(name="Zeta", module="./z", imported="Zeta"),
            SymbolRef(name="Beta", module="./a", imported="Beta"),
            SymbolRef(name="Alpha", module="./a", imported="Alpha"),
            SymbolRef(name="Big", module="big.js", imported="default"),
            SymbolRef(name="Alpha", module="./a", imported="Alpha"),
        ):
            emitter.render_type(ExternalRef(symbol=symbol))
        emitter.import_name("graphql", "GraphQLResolveInfo", type_only=True)

        self.assertEqual(
            emitter.ts_file.render_imports(),
            "\n".join(
                [
                    'import Big from "big.js";',
                    'import type { GraphQLResolveInfo } from "graphql";',
                    'import { Alpha, Beta } from "./a";',
                    'import { Zeta } from "./z";',
                ]
            ),
        )

    def test_value_use_wins_over_type_only(self) -> None:
        emitter = TypeScriptEmitter()
        emitter.import_name("graphql", "GraphQLScalarType", type_only=True)
        emitter.import_name("graphql", "GraphQLScalarType")
        self.assertEqual(
            emitter.ts_file.render_imports(),
            'import { GraphQLScalarType } from "graphql";',
        )

    def test_long_imports_wrap(self) -> None:
        emitter = TypeScriptEmitter()
        names = [f"SomeRatherLongEntityName{i}" for i in range(6)]
        for name in names:
            emitter.import_name("./entities", name)
        self.assertEqual(
            emitter.ts_file.render_imports(),
            "import {\n"
            + "".join(f"  {name},\n" for name in names)
            + '} from "./entities";',
        )


if __name__ == "__main__":
    unittest.main()
