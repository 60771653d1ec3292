"""Default allow-list tables.

Names are case-sensitive: XHTML, MathML and SVG are XML vocabularies, so
`clipPath` and `viewBox` are matched exactly as written here.
"""

from __future__ import annotations

HTML_ELEMENTS: frozenset[str] = frozenset(
    """
    a abbr acronym address area audio b big blockquote br button caption center
    cite code col colgroup dd del dfn dir div dl dt em fieldset font form h1 h2
    h3 h4 h5 h6 hr i img input ins kbd label legend li map menu ol optgroup
    option p pre q s samp select small span strike strong sub sup table tbody
    td textarea tfoot th thead tr tt u ul var video
    """.split()
)

MATHML_ELEMENTS: frozenset[str] = frozenset(
    """
    annotation annotation-xml maction math merror mfrac mfenced mi
    mmultiscripts mn mo mover mpadded mphantom mprescripts mroot mrow mspace
    msqrt mstyle msub msubsup msup mtable mtd mtext mtr munder munderover none
    semantics
    """.split()
)

SVG_ELEMENTS: frozenset[str] = frozenset(
    """
    a animate animateColor animateMotion animateTransform circle clipPath defs
    desc ellipse font-face font-face-name font-face-src foreignObject g glyph
    hkern linearGradient line marker metadata missing-glyph mpath path polygon
    polyline radialGradient rect set stop svg switch text title tspan use
    """.split()
)

HTML_ATTRIBUTES: frozenset[str] = frozenset(
    """
    abbr accept accept-charset accesskey action align alt axis border
    cellpadding cellspacing char charoff charset checked cite class clear cols
    colspan color compact controls coords datetime dir disabled enctype for
    frame headers height href hreflang hspace id ismap label lang longdesc loop
    maxlength media method multiple name nohref noshade nowrap poster prompt
    readonly rel rev rows rowspan rules scope selected shape size span src
    start style summary tabindex target title type usemap valign value vspace
    width xml:lang
    """.split()
)

MATHML_ATTRIBUTES: frozenset[str] = frozenset(
    """
    actiontype align close columnalign columnlines columnspacing columnspan
    depth display displaystyle encoding equalcolumns equalrows fence fontstyle
    fontweight frame height linethickness lspace mathbackground mathcolor
    mathvariant maxsize minsize open other rowalign rowlines rowspacing rowspan
    rspace scriptlevel selection separator separators stretchy width
    xlink:href xlink:show xlink:type xmlns xmlns:xlink
    """.split()
)

SVG_ATTRIBUTES: frozenset[str] = frozenset(
    """
    accent-height accumulate additive alphabetic arabic-form ascent
    attributeName attributeType baseProfile bbox begin by calcMode cap-height
    class clip-path clip-rule color color-rendering content cx cy d dx dy
    descent display dur end fill fill-opacity fill-rule font-family font-size
    font-stretch font-style font-variant font-weight from fx fy g1 g2
    glyph-name gradientUnits hanging height horiz-adv-x horiz-origin-x id
    ideographic k keyPoints keySplines keyTimes lang marker-end marker-mid
    marker-start markerHeight markerUnits markerWidth mathematical max min
    name offset opacity orient origin overline-position overline-thickness
    panose-1 path pathLength points preserveAspectRatio r refX refY
    repeatCount repeatDur requiredExtensions requiredFeatures restart rotate
    rx ry slope stemh stemv stop-color stop-opacity strikethrough-position
    strikethrough-thickness stroke stroke-dasharray stroke-dashoffset
    stroke-linecap stroke-linejoin stroke-miterlimit stroke-opacity
    stroke-width systemLanguage target text-anchor to transform type u1 u2
    underline-position underline-thickness unicode unicode-range units-per-em
    values version viewBox visibility width widths x x-height x1 x2
    xlink:actuate xlink:arcrole xlink:href xlink:role xlink:show xlink:title
    xlink:type xml:base xml:lang xml:space xmlns xmlns:xlink y y1 y2 zoomAndPan
    """.split()
)

URI_ATTRIBUTES: frozenset[str] = frozenset({"href", "src", "cite", "action", "longdesc", "xlink:href", "xml:base"})

# SVG presentation attributes that may reference paint servers, markers, etc.
SVG_ATTR_VAL_ALLOWS_REF: frozenset[str] = frozenset(
    """
    clip-path color-profile cursor fill filter marker marker-start marker-mid
    marker-end mask stroke
    """.split()
)

# SVG elements whose href and xlink:href must stay inside the document.
SVG_ALLOW_LOCAL_HREF: frozenset[str] = frozenset(
    """
    altGlyph animate animateColor animateMotion animateTransform cursor
    feImage filter linearGradient pattern radialGradient textpath tref set use
    """.split()
)

CSS_PROPERTIES: frozenset[str] = frozenset(
    """
    azimuth background-color border-bottom-color border-collapse border-color
    border-left-color border-right-color border-top-color clear color cursor
    direction display elevation float font font-family font-size font-style
    font-variant font-weight height letter-spacing line-height overflow pause
    pause-after pause-before pitch pitch-range richness speak speak-header
    speak-numeral speak-punctuation speech-rate stress text-align
    text-decoration text-indent unicode-bidi vertical-align voice-family
    volume white-space width
    """.split()
)

CSS_KEYWORDS: frozenset[str] = frozenset(
    """
    auto aqua black block blue bold both bottom brown center collapse dashed
    dotted fuchsia gray green !important italic left lime maroon medium none
    navy normal nowrap olive pointer purple red right solid silver teal top
    transparent underline white yellow
    """.split()
)

SVG_CSS_PROPERTIES: frozenset[str] = frozenset(
    """
    fill fill-opacity fill-rule stroke stroke-width stroke-linecap
    stroke-linejoin stroke-opacity
    """.split()
)

PROTOCOLS: frozenset[str] = frozenset(
    """
    ed2k ftp http https irc mailto news gopher nntp telnet webcal xmpp callto
    feed urn aim rsync tag ssh sftp rtsp afs
    """.split()
)

VOID_ELEMENTS: frozenset[str] = frozenset(
    {"img", "br", "hr", "link", "meta", "area", "base", "basefont", "col", "frame", "input", "isindex", "param"}
)

# Shorthand/longhand families whose values are checked token by token.
CSS_SHORTHAND_PREFIXES: frozenset[str] = frozenset({"background", "border", "margin", "padding"})
