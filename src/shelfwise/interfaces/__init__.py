"""Interfaces (application boundary) for SHELFWISE.

Defines framework-free application contracts: protocols/ABCs shared by the
service layer and adapters (e.g., clocks). Business rules stay out of this
package.

Dependency rule: this package is independent; do not import from any
`shelfwise.*` modules. It may be imported by `shelfwise.service_layer`,
`shelfwise.adapters`, and `shelfwise.bootstrap`.
"""
