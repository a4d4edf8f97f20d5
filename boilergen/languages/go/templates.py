"""
Built-in Go templates.

Each template renders a complete Go source file for one table. Templates
receive the mapping produced by TemplateData.to_context().
"""

GENERATED_HEADER = "// Code generated by boilergen. DO NOT EDIT."

STRUCT_TEMPLATE = (
    GENERATED_HEADER
    + """

package {{ package_name }}
{% if imports %}

import (
{% for path in imports %}
    "{{ path }}"
{% endfor %}
)
{% endif %}

// {{ struct_name }} is an object representing the {{ table_name }} table.
type {{ struct_name }} struct {
{% for column in columns %}
    {{ column.name | go_name }} {{ column.type }} `db:"{{ db_name(table_name, column.name) }}"`
{% endfor %}
}
"""
)

SELECT_TEMPLATE = (
    GENERATED_HEADER
    + """

package {{ package_name }}

import (
    "database/sql"
)

// {{ struct_name }}All retrieves every row of the {{ table_name }} table.
func {{ struct_name }}All(db *sql.DB) ([]*{{ struct_name }}, error) {
    rows, err := db.Query(`SELECT {{ select_param_names(table_name, columns) }} FROM {{ table_name }}`)
    if err != nil {
        return nil, err
    }
    defer rows.Close()

    var results []*{{ struct_name }}
    for rows.Next() {
        o := &{{ struct_name }}{}
        if err := rows.Scan({% for column in columns %}&o.{{ column.name | go_name }}{% if not loop.last %}, {% endif %}{% endfor %}); err != nil {
            return nil, err
        }
        results = append(results, o)
    }

    return results, rows.Err()
}
"""
)

INSERT_TEMPLATE = (
    GENERATED_HEADER
    + """

package {{ package_name }}

import (
    "database/sql"
    "errors"
)

// Insert{{ struct_name }} inserts a single row into the {{ table_name }} table.
func Insert{{ struct_name }}(db *sql.DB, {{ var_name }} *{{ struct_name }}) error {
    if {{ var_name }} == nil {
        return errors.New("{{ package_name }}: no {{ struct_name }} provided for insertion")
    }

    _, err := db.Exec(`INSERT INTO {{ table_name }} ({{ columns | insert_param_names }}) VALUES ({{ columns | insert_param_flags }})`,
{% for column in columns %}
        {{ var_name }}.{{ column.name | go_name }},
{% endfor %}
    )
    return err
}
"""
)

DELETE_TEMPLATE = (
    GENERATED_HEADER
    + """

package {{ package_name }}

import (
    "database/sql"
    "errors"
)

// Delete{{ struct_name }} deletes the {{ table_name }} row with the given id.
func Delete{{ struct_name }}(db *sql.DB, id int) error {
    if id == 0 {
        return errors.New("{{ package_name }}: no id provided for {{ struct_name }} delete")
    }

    _, err := db.Exec("DELETE FROM {{ table_name }} WHERE id=$1", id)
    return err
}
"""
)

BUILTIN_TEMPLATES = {
    "struct": STRUCT_TEMPLATE,
    "select": SELECT_TEMPLATE,
    "insert": INSERT_TEMPLATE,
    "delete": DELETE_TEMPLATE,
}
